from .template_parser import TemplateParser
