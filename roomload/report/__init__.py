from .translations import Translator, TRANSLATIONS
from .text_report import render_report
