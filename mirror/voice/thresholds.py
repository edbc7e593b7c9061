"""Named thresholds and lexical constants for the voice engine.

The extractor, the aggregator's change detection, the confidence bands
and the descriptive layer all read their boundaries from here.
"""

FINGERPRINT_VERSION = "1.0.0"

# Extraction
TOP_WORDS_LIMIT = 20
SHORT_SENTENCE_WORDS = 10  # strictly fewer words counts as short
LONG_SENTENCE_WORDS = 25  # strictly more words counts as long
COMPLEX_WORD_SYLLABLES = 3
RATE_PER_WORDS = 1000  # punctuation rates are per 1000 words
RATIO_DIGITS = 4
AVERAGE_DIGITS = 2

# Formality = clamp(BASE + complex*W - contraction*W - pronoun*W - passive*W)
FORMALITY_BASE = 0.5
FORMALITY_COMPLEX_WEIGHT = 2.0
FORMALITY_CONTRACTION_WEIGHT = 3.0
FORMALITY_PRONOUN_WEIGHT = 0.5
FORMALITY_PASSIVE_WEIGHT = 0.1

# Aggregation
EVOLUTION_HISTORY_LIMIT = 50
INITIAL_PROFILE_CHANGE = "initial profile created"
MINOR_REFINEMENT_CHANGE = "minor refinement"

# Confidence curve: DOC_WEIGHT*d/(d+DOC_HALF) + WORD_WEIGHT*w/(w+WORD_HALF)
CONFIDENCE_DOC_WEIGHT = 40.0
CONFIDENCE_DOC_HALF = 3.0
CONFIDENCE_WORD_WEIGHT = 60.0
CONFIDENCE_WORD_HALF = 1500.0

# Band boundaries, shared by labels, readiness tiers and recommendations.
LEARNING_CONFIDENCE = 25
DEVELOPING_CONFIDENCE = 45
READY_CONFIDENCE = 65
MASTERED_CONFIDENCE = 85

# Lower bound of each band, ascending. The last band is closed at 100.
CONFIDENCE_BANDS = (
    (0, "Initializing"),
    (LEARNING_CONFIDENCE, "Learning"),
    (DEVELOPING_CONFIDENCE, "Developing"),
    (READY_CONFIDENCE, "Confident"),
    (MASTERED_CONFIDENCE, "Mastered"),
)
NOT_STARTED_LABEL = "Not Started"

# Readiness tiers, highest first. A score of 0 is tier "none".
CONFIDENCE_TIERS = (
    (MASTERED_CONFIDENCE, "strong"),
    (READY_CONFIDENCE, "established"),
    (DEVELOPING_CONFIDENCE, "emerging"),
    (1, "developing"),
)

# Below this many learned words, recommend longer documents.
RECOMMENDED_SAMPLE_WORDS = 2000

# (target, label, documents needed, words needed)
CONFIDENCE_MILESTONES = (
    (25, "Learning", 1, 500),
    (45, "Developing", 3, 2000),
    (65, "Confident", 5, 5000),
    (85, "Mastered", 8, 10000),
    (100, "Complete", 12, 15000),
)

# Descriptive buckets
SENTENCE_SHORT_AVG = 12.0
SENTENCE_LONG_AVG = 20.0
SENTENCE_VARIATION_DYNAMIC = 8.0
FORMALITY_CASUAL = 0.35
FORMALITY_FORMAL = 0.65
COMPLEX_WORDS_SIMPLE = 0.08
COMPLEX_WORDS_SOPHISTICATED = 0.15
CONTRACTIONS_AVOIDED = 0.005
CONTRACTIONS_FREE = 0.02
HEDGE_DENSITY_HIGH = 0.015
ASSERTIVE_DENSITY_HIGH = 0.008
PERSONAL_PRONOUN_HIGH = 0.04
EXCLAMATION_EXPRESSIVE = 3.0  # per 1000 words
QUESTION_FREQUENT = 5.0  # per 1000 words
DASH_EMPHATIC = 3.0  # per 1000 words
TRANSITION_RATE_HIGH = 0.15  # per sentence
HIGHLIGHTS_LIMIT = 5

# Fingerprint comparison: dimension -> (high, medium) absolute deltas
COMPARISON_THRESHOLDS = {
    "formality": (0.2, 0.1),
    "sentence-length": (5.0, 2.0),
    "hedge-usage": (1.0, 0.5),
    "word-complexity": (5.0, 2.0),
    "personal-voice": (3.0, 1.0),
}

# Lexical sets. Multi-word entries are matched as phrases on word boundaries.
STOPWORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
    "be", "have", "has", "had", "do", "does", "did", "will", "would",
    "could", "should", "may", "might", "must", "shall", "can", "need",
    "this", "that", "these", "those", "it", "its", "they", "them", "their",
    "he", "she", "him", "her", "his", "hers", "we", "us", "our", "you", "your",
    "who", "which", "what", "where", "when", "why", "how", "all", "each",
    "every", "both", "few", "more", "most", "other", "some", "such", "no",
    "not", "only", "same", "so", "than", "too", "very", "just", "also",
    "i", "me", "my", "if", "then", "there", "about", "into", "over", "out",
    "up", "down", "because", "while", "any", "own", "am",
})

CONTRACTIONS = (
    "i'm", "i've", "i'll", "i'd", "you're", "you've", "you'll", "you'd",
    "he's", "she's", "it's", "we're", "we've", "we'll", "we'd", "they're",
    "they've", "they'll", "they'd", "isn't", "aren't", "wasn't", "weren't",
    "hasn't", "haven't", "hadn't", "doesn't", "don't", "didn't", "won't",
    "wouldn't", "couldn't", "shouldn't", "can't", "mustn't", "let's",
    "that's", "who's", "what's", "here's", "there's", "where's", "how's",
    "ain't",
)

PERSONAL_PRONOUNS = (
    "i", "me", "my", "mine", "myself", "we", "us", "our", "ours", "ourselves",
)

HEDGE_PHRASES = (
    "maybe", "perhaps", "i think", "i believe", "i guess", "i suppose",
    "kind of", "sort of", "somewhat", "probably", "possibly", "might",
    "could be", "seems", "appears", "tend to", "in my opinion",
)

QUALIFIER_WORDS = (
    "very", "really", "quite", "pretty", "fairly", "rather", "somewhat",
    "extremely", "incredibly", "absolutely", "totally", "completely",
    "definitely", "certainly",
)

ASSERTIVE_WORDS = (
    "clearly", "obviously", "definitely", "certainly", "undoubtedly",
    "surely", "indeed", "of course", "naturally", "evidently",
)

TRANSITION_WORDS = (
    "however", "therefore", "moreover", "furthermore", "nevertheless",
    "nonetheless", "consequently", "accordingly", "hence", "thus",
    "meanwhile", "subsequently", "additionally", "likewise", "similarly",
    "conversely", "otherwise", "instead", "alternatively",
)

EXAMPLE_PHRASES = (
    "for example", "for instance", "such as", "including", "namely",
    "specifically", "particularly", "especially", "e.g.", "i.e.",
)

BE_VERBS = ("was", "were", "is", "are", "been", "being", "be")

IRREGULAR_PARTICIPLES = (
    "made", "done", "given", "taken", "seen", "known", "found", "shown",
    "told", "written", "read", "built", "bought", "brought", "caught",
    "chosen", "drawn", "driven", "eaten", "fallen", "felt", "forgotten",
    "gotten", "grown", "hidden", "hit", "held", "kept", "left", "lost",
    "meant", "met", "paid", "put", "run", "said", "sent", "set", "shot",
    "shut", "sung", "sold", "spent", "struck", "taught", "thought",
    "thrown", "understood", "won", "worn", "wound",
)
