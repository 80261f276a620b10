"""
Keyword tables shared by the rule-based classifiers.

Order matters: categories are scored in declaration order and the first
category to reach the highest count wins.
"""
from types import MappingProxyType

CATEGORY_KEYWORDS = MappingProxyType({
    "work": ("meeting", "project", "deadline", "client", "report", "presentation", "email", "call", "office", "work"),
    "personal": ("gym", "workout", "exercise", "hobby", "family", "friend", "movie", "shop", "buy", "personal", "home"),
    "health": ("doctor", "appointment", "medication", "pill", "exercise", "diet", "gym", "health", "medical", "fitness"),
    "education": ("study", "course", "class", "homework", "assignment", "lecture", "learn", "read", "book", "school", "university"),
    "finance": ("pay", "bill", "bank", "money", "budget", "expense", "tax", "invoice", "salary", "finance", "financial"),
})

UNCATEGORIZED = "uncategorized"

HIGH_PRIORITY_WORDS = ("urgent", "immediate", "critical", "asap", "important", "deadline", "tomorrow", "today")
MEDIUM_PRIORITY_WORDS = ("soon", "next week", "priority", "significant", "needed")

COMPLEXITY_WORDS = MappingProxyType({
    "quick": ("quick", "simple", "easy", "fast", "brief", "short"),
    "medium": ("review", "update", "check", "write", "read"),
    "complex": ("create", "develop", "implement", "analyze", "research", "design", "prepare", "complex"),
})

SENTIMENT_WORDS = MappingProxyType({
    "positive": (
        "excited", "happy", "great", "good", "love", "excellent", "amazing", "awesome",
        "fantastic", "enjoy", "fun", "nice", "looking forward", "interested", "motivated",
        "eager", "pleased", "accomplish", "achieve", "success", "celebration", "proud",
    ),
    "neutral": (
        "ok", "fine", "alright", "moderate", "adequate", "acceptable", "standard",
        "normal", "usual", "routine", "regular", "typical", "common", "ordinary",
        "decent", "fair", "reasonable", "satisfactory", "sufficient", "enough",
    ),
    "negative": (
        "boring", "hard", "difficult", "challenging", "tough", "tedious", "dreading",
        "hate", "dislike", "annoying", "frustrating", "bad", "terrible", "awful",
        "dreadful", "stressful", "overwhelming", "exhausting", "tiring", "afraid",
        "worried", "anxious", "nervous", "concerned", "unhappy", "sad",
    ),
})

STRESS_MARKERS = ("stress", "overwhelm", "anxious")
BOREDOM_MARKERS = ("bore", "tedious", "mundane")

# Productive weight and favoured categories per time bucket
TIME_OF_DAY_PROFILE = MappingProxyType({
    "morning": MappingProxyType({"productive": 80, "categories": ("work", "education")}),
    "afternoon": MappingProxyType({"productive": 60, "categories": ("personal", "health")}),
    "evening": MappingProxyType({"productive": 40, "categories": ("personal", "finance")}),
    "night": MappingProxyType({"productive": 30, "categories": ("personal",)}),
})

DAY_TYPE_PROFILE = MappingProxyType({
    "weekday": MappingProxyType({"productive": 75, "categories": ("work", "education", "finance")}),
    "weekend": MappingProxyType({"productive": 50, "categories": ("personal", "health")}),
})
