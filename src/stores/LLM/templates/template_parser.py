import importlib
import os

import logging
logger = logging.getLogger(__name__)

class TemplateParser:

    def __init__(self, lang: str = None, default_lang: str = "en"):
        self.current_path = os.path.dirname(os.path.abspath(__file__))
        self.default_lang = default_lang
        self.lang = None

        self.set_language(lang)

    def set_language(self, lang: str):
        if not lang:
            self.lang = self.default_lang
            return

        language_path = os.path.join(self.current_path, "locales", lang)
        if os.path.exists(language_path):
            self.lang = lang
        else:
            logger.warning(f"No templates for language '{lang}', using '{self.default_lang}'")
            self.lang = self.default_lang

    def get(self, group: str, key: str, vars: dict = None):
        """Return template `key` of `group` with `vars` substituted, or None."""
        if not group or not key:
            return None

        target_lang = self.lang
        group_path = os.path.join(self.current_path, "locales", target_lang, f"{group}.py")
        if not os.path.exists(group_path):
            target_lang = self.default_lang
            group_path = os.path.join(self.current_path, "locales", target_lang, f"{group}.py")

        if not os.path.exists(group_path):
            logger.error(f"Template group '{group}' not found")
            return None

        module = importlib.import_module(f"{__package__}.locales.{target_lang}.{group}")
        template = getattr(module, key, None)
        if template is None:
            logger.error(f"Template '{group}.{key}' not found")
            return None

        return template.substitute(vars or {})
