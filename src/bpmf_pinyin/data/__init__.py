"""Static phonetic tables and the longest-match dictionary."""
