"""Cœur indépendant de l'UI : modèles, cache, tri, état de sélection."""
