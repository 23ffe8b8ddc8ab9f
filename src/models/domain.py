import enum


class DetectionStrategy(str, enum.Enum):
    CONSERVATIVE = "conservative"
    LIBERAL = "liberal"
    BOTH = "both"


class CompetitorSource(str, enum.Enum):
    CATALOG = "catalog"
    GLOBAL = "global"
    DISCOVERED = "discovered"


class Sentiment(str, enum.Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class MentionContext(str, enum.Enum):
    RECOMMENDATION = "recommendation"
    COMPARISON = "comparison"
    EXAMPLE = "example"
    MENTION = "mention"
