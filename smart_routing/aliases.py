"""Built-in condition aliases.

An alias is a named, reusable condition ("Weekend", "Mobile", ...) that rule
authors pick instead of typing the variable, operator and value by hand.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .models import ConditionOperator, RuleCondition


class AliasCategory(str, Enum):
    """Alias groupings."""

    OS = "os"
    DEVICE = "device"
    BROWSER = "browser"
    COUNTRY = "country"
    TIME = "time"
    LANGUAGE = "language"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ConditionAlias:
    """Named condition."""

    name: str
    category: AliasCategory
    variable: str
    operator: ConditionOperator
    value: str
    icon: Optional[str] = None
    is_system: bool = True

    def to_condition(self) -> RuleCondition:
        """Expand into the condition it stands for."""
        return RuleCondition(
            variable=self.variable,
            operator=self.operator.value,
            value=self.value,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "category": self.category.value,
            "variable": self.variable,
            "operator": self.operator.value,
            "value": self.value,
            "icon": self.icon,
            "is_system": self.is_system,
        }


def _alias(name, category, variable, operator, value, icon=None):
    return ConditionAlias(
        name=name,
        category=AliasCategory(category),
        variable=variable,
        operator=ConditionOperator(operator),
        value=value,
        icon=icon,
    )


SYSTEM_ALIASES: List[ConditionAlias] = [
    # OS
    _alias("Windows", "os", "device.os", "equals", "Windows", "🪟"),
    _alias("Mac", "os", "device.os", "equals", "macOS", "🍎"),
    _alias("Linux", "os", "device.os", "equals", "Linux", "🐧"),
    _alias("iOS", "os", "device.os", "equals", "iOS", "📱"),
    _alias("Android", "os", "device.os", "equals", "Android", "🤖"),
    # Device
    _alias("Mobile", "device", "device.type", "equals", "mobile", "📱"),
    _alias("Desktop", "device", "device.type", "equals", "desktop", "🖥️"),
    _alias("Tablet", "device", "device.type", "equals", "tablet", "📱"),
    # Browser
    _alias("Chrome", "browser", "device.browser", "equals", "Chrome", "🌐"),
    _alias("Firefox", "browser", "device.browser", "equals", "Firefox", "🦊"),
    _alias("Safari", "browser", "device.browser", "equals", "Safari", "🧭"),
    _alias("Edge", "browser", "device.browser", "equals", "Edge", "🌐"),
    # Countries
    _alias("Spain", "country", "geo.country", "equals", "ES", "🇪🇸"),
    _alias("USA", "country", "geo.country", "equals", "US", "🇺🇸"),
    _alias("Mexico", "country", "geo.country", "equals", "MX", "🇲🇽"),
    _alias("UK", "country", "geo.country", "equals", "GB", "🇬🇧"),
    _alias("France", "country", "geo.country", "equals", "FR", "🇫🇷"),
    _alias("Germany", "country", "geo.country", "equals", "DE", "🇩🇪"),
    # Time
    _alias("Morning", "time", "time.hour", "between", "6-11", "🌅"),
    _alias("Afternoon", "time", "time.hour", "between", "12-17", "☀️"),
    _alias("Evening", "time", "time.hour", "between", "18-21", "🌆"),
    # TODO: teach between to wrap past midnight; until then "22-5" never matches
    _alias("Night", "time", "time.hour", "between", "22-5", "🌙"),
    _alias("Weekday", "time", "time.day", "in", "1,2,3,4,5", "📅"),
    _alias("Weekend", "time", "time.day", "in", "6,7", "🎉"),
    # Language
    _alias("Spanish", "language", "http.language", "equals", "es", "🇪🇸"),
    _alias("English", "language", "http.language", "equals", "en", "🇬🇧"),
]

_BY_NAME: Dict[str, ConditionAlias] = {alias.name.lower(): alias for alias in SYSTEM_ALIASES}


def get_alias(name: str) -> Optional[ConditionAlias]:
    """Look up a system alias by name (case-insensitive)."""
    return _BY_NAME.get(name.lower()) if name else None


def list_aliases(category: Optional[str] = None) -> List[ConditionAlias]:
    """List system aliases, optionally restricted to one category.

    Args:
        category: Category value (e.g. "time"); unknown categories give []

    Returns:
        Aliases in catalog order
    """
    if category is None:
        return list(SYSTEM_ALIASES)
    return [alias for alias in SYSTEM_ALIASES if alias.category.value == category.lower()]


def expand_alias(name: str) -> RuleCondition:
    """Expand an alias name into its condition.

    Raises:
        ValueError: If no alias has that name
    """
    alias = get_alias(name)
    if alias is None:
        raise ValueError(f"Unknown condition alias: {name}")
    return alias.to_condition()
