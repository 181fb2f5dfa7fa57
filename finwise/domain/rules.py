"""Keyword tables, category sets and thresholds used by the scoring rules"""

# Enumerations
TRANSACTION_TYPES = frozenset({"income", "expense"})
CLASSIFICATIONS = frozenset({"asset", "liability", "neutral"})
EMOTIONAL_STATES = frozenset(
    {"happy", "sad", "stressed", "neutral", "excited", "anxious", "motivated", "satisfied"}
)
GOAL_STATUSES = frozenset({"active", "completed", "paused"})
PRIORITIES = frozenset({"low", "medium", "high"})
PERIODS = ("daily", "weekly", "monthly", "yearly")

# Book references
PAI_RICO = "pai_rico_pai_pobre"
PSICOLOGIA = "psicologia_financeira"
BABILONIA = "homem_mais_rico_babilonia"

# Classifier (Pai Rico): keywords are matched against the lowercased description
ASSET_KEYWORDS = ("investimento", "curso", "livro", "ação", "fundo", "imóvel", "negócio")
LIABILITY_KEYWORDS = ("financiamento", "prestação", "cartão", "empréstimo")
ASSET_CATEGORIES = frozenset({"investment", "education", "business", "real_estate"})
LIABILITY_CATEGORIES = frozenset({"luxury", "entertainment", "debt", "unnecessary"})
HIGH_VALUE_INCOME_SHARE = 0.15

# Financial education
EDUCATION_CATEGORIES = frozenset({"education", "books", "courses"})
EDUCATION_KEYWORDS = ("curso", "livro", "educação", "treinamento", "workshop")

# Emotional and impulsive spending (Psicologia Financeira)
EMOTIONAL_SPENDING_STATES = frozenset({"stressed", "sad", "excited", "anxious"})
IMPULSIVE_STATES = frozenset({"excited", "stressed", "anxious"})
IMPULSIVE_AMOUNT_THRESHOLD = 200
VAGUE_DESCRIPTION_LENGTH = 10

# Ten-percent rule and discipline (Babilônia)
TEN_PERCENT_RULE_RATE = 10
UNNECESSARY_CATEGORIES = frozenset({"luxury", "entertainment", "impulse"})
INVESTMENT_CATEGORIES = frozenset({"investment", "education", "business"})
INVESTMENT_BONUS_WEIGHT = 0.5

# Wealth protection
HIGH_RISK_CATEGORIES = frozenset({"gambling", "speculation", "high_risk_investment"})
HIGH_RISK_KEYWORDS = ("aposta", "jogo", "especulação", "day trade")

# Recommendation engine
EDUCATION_INCOME_SHARE = 0.03
EMOTIONAL_INCOME_SHARE = 0.2
CONSISTENCY_THRESHOLD = 70
DISCIPLINE_THRESHOLD = 80
GOAL_INCOME_SHARE = 0.3
GOAL_DAYS_PER_MONTH = 30
TRANSACTION_INCOME_SHARE = 0.1
TRANSACTION_EMOTIONAL_STATES = frozenset({"excited", "stressed", "sad"})
URGENT_CATEGORIES = frozenset({"saving", "behavior"})

# Statistics
DEBT_PAYMENT_CATEGORIES = frozenset({"debt_payment"})
