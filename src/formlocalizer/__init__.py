"""
FormLocalizer: runtime localization of PyQt6 widget trees from JSON language packs.
"""
