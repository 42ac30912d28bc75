# Placeholders for records the hosted backend no longer has.
UNKNOWN_LESSON_TITLE = 'Unknown Lesson'
UNKNOWN_LESSON_CONTENT = ''
UNKNOWN_TUTOR_ID = 'unknown'
UNKNOWN_TUTOR_FIRST_NAME = 'Unknown'
UNKNOWN_TUTOR_LAST_NAME = 'Tutor'
UNKNOWN_TUTOR_EMAIL = ''

# Score reported when an attempt has nothing left to auto-grade.
NOTHING_TO_GRADE_SCORE = 100

# Tutor score from which a reviewed text answer counts as correct.
PASSING_TUTOR_SCORE = 50

MIN_SCORE = 0
MAX_SCORE = 100
MIN_PROGRESS = 0
MAX_PROGRESS = 100

MIN_DURATION_MINUTES = 1
MAX_DURATION_MINUTES = 120
DEFAULT_DURATION_MINUTES = 5
