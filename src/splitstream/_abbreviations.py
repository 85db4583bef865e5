"""Tokens that do not end a sentence even when followed by a period."""

# Dotted single-letter runs (u.s.a, e.g, i.e) are caught by the initials and
# lowercase-continuation checks instead of living here.
ABBREVIATIONS: frozenset[str] = frozenset({
    # Titles and ranks
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr",
    "sgt", "col", "gen", "rep", "sen", "gov", "lt", "maj", "capt",
    # Places
    "st", "mt",
    # Business and misc
    "etc", "co", "inc", "ltd", "dept", "vs", "p", "pg",
    # Months
    "jan", "feb", "mar", "apr", "jun", "jul", "aug",
    "sep", "sept", "oct", "nov", "dec",
    # Days of the week
    "sun", "mon", "tu", "tue", "tues", "wed",
    "th", "thu", "thur", "thurs", "fri", "sat",
})
