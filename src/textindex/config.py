import os

# Tokenization for per-document ternary trees (split on runs of non-word chars)
TOKEN_SPLIT: str = r"\W+"

# Exact-count algorithms exposed by count_exact()
COUNT_ALGORITHMS = ("kmp", "boyer-moore", "naive")
DEFAULT_COUNT_ALGORITHM: str = "kmp"

# Corpus files picked up by the directory loader
CORPUS_EXTS = (".txt",)

# Vocabulary CSV columns (phone catalog: model + brand)
CSV_NAME_FIELD: str = "model"
CSV_CATEGORY_FIELD: str = "company"

# Default record store
DEFAULT_DSN: str = "memory://"

# Progress logging (set TEXTINDEX_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("TEXTINDEX_VERBOSE") == "1"
