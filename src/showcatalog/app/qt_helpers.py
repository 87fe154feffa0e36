"""Helpers Qt partagés (UI)."""

from __future__ import annotations

from collections.abc import Sequence

from PySide6.QtGui import QStandardItemModel
from PySide6.QtWidgets import QComboBox

from showcatalog.app.presentation import Placeholder, SelectorOption


def fill_combo(
    combo: QComboBox,
    *,
    options: Sequence[SelectorOption],
    placeholders: Sequence[Placeholder] = (),
) -> None:
    """Recharge un combo : entrées réservées d'abord, puis les options.

    Les signaux sont bloqués pendant le rechargement : aucune sélection n'est
    notifiée au contrôleur.
    """
    combo.blockSignals(True)
    combo.clear()
    selected_index = -1
    for placeholder in placeholders:
        combo.addItem(placeholder.text, placeholder.value)
        row = combo.count() - 1
        if placeholder.disabled:
            model = combo.model()
            if isinstance(model, QStandardItemModel):
                item = model.item(row)
                if item is not None:
                    item.setEnabled(False)
        if placeholder.selected and selected_index < 0:
            selected_index = row
    for option in options:
        combo.addItem(option.label, option.value)
    if selected_index >= 0:
        combo.setCurrentIndex(selected_index)
    combo.blockSignals(False)


def select_combo_value(combo: QComboBox, value: str) -> None:
    """Sélectionne l'entrée portant `value` sans émettre de signal."""
    index = combo.findData(value)
    if index < 0:
        return
    combo.blockSignals(True)
    combo.setCurrentIndex(index)
    combo.blockSignals(False)
