"""Page Object Model classes for the Gaps E2E scenarios."""

from .base_page import NAV_TABS, BasePage
from .configuration_page import ConfigurationPage
from .libraries_page import LibrariesPage, results_info

__all__ = ["BasePage", "ConfigurationPage", "LibrariesPage", "NAV_TABS", "results_info"]
