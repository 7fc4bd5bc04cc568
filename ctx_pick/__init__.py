"""ctx-pick - build LLM context payloads from files named on the command line.

Inputs may be exact paths, directories, glob patterns or partial filenames.
Resolved files are deduplicated, ordered by first mention and rendered as
Markdown, either in full or as a depth-bounded syntax-tree skeleton.
"""

__version__ = "0.3.1"
