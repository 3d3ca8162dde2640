"""Widgets whose text comes from a translation key."""

from textual.widgets import Button, Static

from holical.i18n import Translator


class TranslatedLabel(Static):
    """Static text re-rendered whenever the language changes."""

    def __init__(self, i18n_key: str, default: str = "", **kwargs) -> None:
        super().__init__(default, **kwargs)
        self.text = default
        self.i18n_key = i18n_key
        self.default = default

    def retranslate(self, translator: Translator) -> None:
        self.text = translator.t(self.i18n_key, default=self.default or None)
        self.update(self.text)


class NavLink(Button):
    """Button standing in for an internal or external link."""

    def __init__(self, href: str, i18n_key: str, default: str = "", **kwargs) -> None:
        super().__init__(default or href, **kwargs)
        self.href = href
        self.i18n_key = i18n_key
        self.default = default

    def retranslate(self, translator: Translator) -> None:
        self.label = translator.t(self.i18n_key, default=self.default or None)
