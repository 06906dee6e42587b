"""Map free-text weather conditions to icons and short labels."""

from dataclasses import dataclass

from shoresquad.models.forecast import Condition, Icon

GOOD_WEATHER = "Good beach weather!"


@dataclass(frozen=True)
class ConditionRule:
    condition: Condition
    any_of: tuple[str, ...] = ()
    all_of: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        if self.all_of and not all(k in text for k in self.all_of):
            return False
        if self.any_of and not any(k in text for k in self.any_of):
            return False
        return bool(self.any_of or self.all_of)


# Order matters: first match wins, so more specific rules come first
# ("heavy rain" before "rain", "partly cloudy" before "cloudy").
CONDITION_RULES: tuple[ConditionRule, ...] = (
    ConditionRule(
        Condition(Icon.STORMY, "Thundery", "Thunderstorms expected"),
        any_of=("thunder", "storm"),
    ),
    ConditionRule(
        Condition(Icon.HEAVY_RAIN, "Heavy Rain", "Heavy rain likely"),
        any_of=("heavy rain", "heavy showers"),
    ),
    ConditionRule(
        Condition(Icon.LIGHT_RAIN, "Showers", "Showers possible"),
        any_of=("rain", "showers"),
    ),
    ConditionRule(
        Condition(Icon.PARTLY_CLOUDY, "Partly Cloudy", GOOD_WEATHER),
        all_of=("cloudy", "partly"),
    ),
    ConditionRule(
        Condition(Icon.CLOUDY, "Cloudy", "May see some clouds"),
        any_of=("cloudy", "overcast"),
    ),
    ConditionRule(
        Condition(Icon.SUNNY, "Fair", GOOD_WEATHER),
        any_of=("fair", "sunny"),
    ),
    ConditionRule(
        Condition(Icon.HAZE, "Hazy", GOOD_WEATHER),
        any_of=("hazy", "haze"),
    ),
)

DEFAULT_CONDITION = Condition(Icon.PARTLY_SUNNY, "Fair", GOOD_WEATHER)


def classify(text: str | None) -> Condition:
    """Classify a condition string. Case-insensitive, never fails."""
    lowered = (text or "").lower()
    for rule in CONDITION_RULES:
        if rule.matches(lowered):
            return rule.condition
    return DEFAULT_CONDITION
