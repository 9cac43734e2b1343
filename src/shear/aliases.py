from shear.core.models import SortOrder, HashAlgorithmKind

SORT_ALIASES = {
    "longest-path": SortOrder.LONGEST_PATH,
    "longest": SortOrder.LONGEST_PATH,
    "shortest-path": SortOrder.SHORTEST_PATH,
    "shortest": SortOrder.SHORTEST_PATH,
    "newest": SortOrder.NEWEST,
    "oldest": SortOrder.OLDEST,
    "first": SortOrder.FIRST_ENCOUNTERED,
}

SORT_CHOICES = list(SORT_ALIASES.keys())

SORT_HELP_TEXT = (
    "Which file of a duplicate group is kept (the rest are reported):\n"
    "  longest-path  : Longest path string (default)\n"
    "  shortest-path : Shortest path string\n"
    "  newest        : Most recently modified file\n"
    "  oldest        : Least recently modified file\n"
    "  first         : First file found while walking\n"
)

ALGORITHM_ALIASES = {
    "sha256": HashAlgorithmKind.SHA256,
    "xxh3": HashAlgorithmKind.XXH3_128,
}

ALGORITHM_CHOICES = list(ALGORITHM_ALIASES.keys())

ALGORITHM_HELP_TEXT = (
    "Digest for sampled content fingerprints:\n"
    "  sha256 : SHA-256, 256-bit cryptographic digest (default)\n"
    "  xxh3   : xxHash3 128-bit, faster, non-cryptographic\n"
)

EPILOG_TEXT = """
Files are compared by length, then by digests of their first and last
8MB (see --sample-size). Files larger than twice the sample size that
differ only in the middle are reported as duplicates.

Examples:
  List redundant copies in Downloads (one path per line)
  %(prog)s ~/Downloads

  Keep the newest copy instead of the longest path
  %(prog)s ~/Downloads --sort newest

  Report files in ~/Backup that already exist in ~/Photos
  %(prog)s ~/Photos --compare ~/Backup

  Only the top level of a directory, with statistics on stderr
  %(prog)s ~/Downloads --no-recurse --verbose
"""
