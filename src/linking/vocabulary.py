"""
Closed vocabularies used by candidate extraction.

Everything here is static and shipped with the package. Extending the
deny-list is a manual process: add the word, rerun the tests.
"""

from typing import FrozenSet

# Connectives the greedy pass may bridge ("Secretary of State")
FILLER_WORDS = ("of", "and", "in", "on", "under", "the", "for")

# Capitalised-word token: uppercase Latin letter, then letters/apostrophes/hyphens
CAPS_WORD = r"[A-Z][a-zA-Z'\-]+"

FILLER = r"(?:" + "|".join(FILLER_WORDS) + r")"

# Single words that look like proper nouns but make poor links on their own.
# Multi-word phrases containing them ("South Korea") are unaffected.
SKIP_WORDS: FrozenSet[str] = frozenset({
    # Pronouns and determiners
    'The', 'This', 'That', 'There', 'Their', 'They', 'What', 'When',
    'Where', 'Which', 'Who', 'Why', 'How',
    'He', 'She', 'His', 'Her', 'Him', 'Its', 'We', 'Our', 'You', 'Your', 'My',

    # Days and months
    'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday',
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',

    # Common English words that are also Wikipedia titles
    'About', 'After', 'Again', 'Album', 'Also', 'Ammunition', 'Another',
    'Archive', 'Assault', 'Before', 'Being', 'Both', 'But', 'Cash', 'Cast',
    'Category', 'Christmas', 'Code', 'Contact', 'Control', 'Copyright',
    'Despite', 'Download', 'Each', 'Email', 'Error', 'Even', 'Every',
    'Everything', 'Evidence', 'Expect', 'Family', 'Film', 'Fireworks',
    'First', 'Following', 'Former', 'Free', 'Freedom', 'From', 'General',
    'Golden', 'Good', 'Great', 'Greatness', 'Greed', 'Here', 'Image',
    'Indeed', 'Just', 'Keep', 'Language', 'Last', 'Life', 'Like', 'Link',
    'List', 'Live', 'Machine', 'Many', 'Media', 'Meanwhile', 'Minutes',
    'More', 'Most', 'Much', 'Name', 'Nation', 'Never', 'New', 'News', 'Next',
    'Night', 'Nobody', 'None', 'Nothing', 'Number', 'Office', 'Often',
    'Only', 'Other', 'Over', 'Page', 'People', 'Play', 'Please', 'Pointless',
    'Police', 'Power', 'Productivity', 'Public', 'Question', 'Radio', 'Real',
    'Same', 'Service', 'Several', 'Sign', 'Since', 'Sniper', 'Some', 'South',
    'Special', 'Stalemate', 'State', 'Steam', 'Still', 'Success', 'Such',
    'Sunrise', 'Time', 'Title', 'Today', 'Together', 'Very', 'Watch',
    'Website', 'Wedding', 'Welcome', 'Well', 'While', 'White', 'Whole',
    'Woman', 'Wood', 'World', 'Writer', 'Year', 'Zero',

    # Compass points (fine inside "North Korea", useless alone)
    'North', 'East', 'West',

    # Demonym adjectives: link the country instead
    'African', 'American', 'Arab', 'Asian', 'Australian', 'Brazilian',
    'British', 'Canadian', 'Chinese', 'Dutch', 'Egyptian', 'English',
    'European', 'French', 'German', 'Greek', 'Indian', 'Iranian', 'Iraqi',
    'Irish', 'Islamic', 'Israeli', 'Italian', 'Japanese', 'Korean', 'Latin',
    'Mexican', 'Palestinian', 'Polish', 'Russian', 'Scottish', 'Spanish',
    'Swedish', 'Turkish', 'Ukrainian', 'Vietnamese', 'Welsh',

    # Institutional/role words (too generic alone)
    'Academic', 'Athletes', 'Bureaucrat', 'Cabinet', 'Commons',
    'Conservative', 'Constitution', 'Creativity', 'Customs', 'Democracy',
    'Deputy', 'Environment', 'Geography', 'Health', 'History', 'House',
    'Immigration', 'Justice', 'Liberal', 'Ministry', 'Opposition',
    'Parliament', 'Partnership', 'Poetry', 'Prince', 'Princess', 'Producer',
    'Professor', 'Republic', 'Secretary', 'Security', 'Transparency',
    'Treasury',

    # Stock photo credits
    'Alamy', 'Getty', 'Shutterstock',
})
