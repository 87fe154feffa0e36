from showcatalog.app.widgets.card_list import CardListWidget, image_alt_text

__all__ = ["CardListWidget", "image_alt_text"]
