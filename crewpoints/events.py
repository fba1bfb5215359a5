"""Derive scoring facets from free-text event names.

Every classifier here is an ordered table of ``(pattern, value)`` pairs where
the first match wins. Nothing raises: names that match no pattern fall back
to a documented default.
"""
import re
from collections import namedtuple

from .models import Gender

EventName = namedtuple("EventName", ["name", "bracket", "bracket_type"])

# code, pattern identifying the suffix, then either a pattern extracting the
# bracket index or a literal index. Rules with code "Err" carry a message.
# A suffix may follow a digit ("8H1") but never a letter ("Girls 4").
BracketRule = namedtuple("BracketRule", ["code", "pattern", "index"])

BRACKET_RULES = [
    BracketRule("QAD", re.compile(r"(?<![a-z])QAD[1-4]$", re.I), re.compile(r"[1-4]$")),
    BracketRule("QEH", re.compile(r"(?<![a-z])QEH[1-4]$", re.I), re.compile(r"[1-4]$")),
    BracketRule("QAD", re.compile(r"(?<![a-z])QF[1-4]+$", re.I), re.compile(r"[1-4]$")),
    BracketRule("SAB", re.compile(r"(?<![a-z])SAB[1-4]+$", re.I), re.compile(r"[1-4]$")),
    BracketRule("SAB", re.compile(r"(?<![a-z])S(emi)? *[1-4]+$", re.I), re.compile(r"[1-4]$")),
    BracketRule("SCD", re.compile(r"(?<![a-z])SCD[1-4]+$", re.I), re.compile(r"[1-4]$")),
    BracketRule("SEF", re.compile(r"(?<![a-z])SEF[1-4]+$", re.I), re.compile(r"[1-4]$")),
    BracketRule("SGH", re.compile(r"(?<![a-z])SGH[1-4]+$", re.I), re.compile(r"[1-4]$")),
    # timed finals must be tested before FA, FB
    BracketRule("TF", re.compile(r"(?<![a-z])T(imed)? *F(inal)? *[A-D]$", re.I), re.compile(r"[A-D]$", re.I)),
    BracketRule("TF", re.compile(r"(?<![a-z])T(imed)? *F(inal)?$", re.I), "A"),
    # must come after QEH
    BracketRule("H", re.compile(r"(?<![a-z])H(eat)? *[1-9][0-9]*$", re.I), re.compile(r"[1-9][0-9]*$")),
    BracketRule("FA", re.compile(r"(?<![a-z])Final$", re.I), ""),
    BracketRule("FA", re.compile(r"(?<![a-z])F(inal)? *A$", re.I), ""),
    BracketRule("FB", re.compile(r"(?<![a-z])F(inal)? *B$", re.I), ""),
    BracketRule("FC", re.compile(r"(?<![a-z])F(inal)? *C$", re.I), ""),
    BracketRule("FD", re.compile(r"(?<![a-z])F(inal)? *D$", re.I), ""),
    BracketRule("FE", re.compile(r"(?<![a-z])F(inal)? *E$", re.I), ""),
    BracketRule("FF", re.compile(r"(?<![a-z])F(inal)? *F$", re.I), ""),
    BracketRule("FG", re.compile(r"(?<![a-z])F(inal)? *G$", re.I), ""),
    BracketRule("FH", re.compile(r"(?<![a-z])F(inal)? *H$", re.I), ""),
    BracketRule("TT", re.compile(r"(?<![a-z])T(ime)? *T(rial)?$", re.I), "1"),
    BracketRule("TT", re.compile(r"(?<![a-z])T(ime)? *T(rial)?[1-9][0-9]*$", re.I), re.compile(r"[1-9][0-9]*$")),
    # unsupported spellings
    BracketRule("Err", re.compile(r"(?<![a-z])QAD$", re.I), "Must be QAD1-4"),
    BracketRule("Err", re.compile(r"(?<![a-z])QEH$", re.I), "Must be QEH1-4"),
    BracketRule("Err", re.compile(r"(?<![a-z])SAB$", re.I), "Must be SAB1-4"),
    BracketRule("Err", re.compile(r"(?<![a-z])SCD$", re.I), "Must be SCD1-4"),
]

SEAT_PATTERNS = [
    (re.compile(r"(?<![\d.])1x", re.I), 1),
    (re.compile(r"(?<![\d.])2[x+-]", re.I), 2),
    (re.compile(r"(?<![\d.])4[x+-]", re.I), 4),
    (re.compile(r"(?<![\d.])8[x+]?(?!\d)", re.I), 8),
    # canoe / kayak
    (re.compile(r"\b[CK]1(?!\d)", re.I), 1),
    (re.compile(r"\b[CK]2(?!\d)", re.I), 2),
    (re.compile(r"\b[CK]4(?!\d)", re.I), 4),
]

GENDER_PATTERNS = [
    (re.compile(r"MIXED|\bMIX\b|\bCO-?ED\b"), Gender.MIXED),
    (re.compile(r"WOMEN|GIRL|LADIES"), Gender.WOMENS),
    (re.compile(r"\bMEN|\bBOY"), Gender.MENS),
]

WOMENS_EVENT_PATTERNS = [re.compile(r"WOMEN"), re.compile(r"GIRL")]

JUNIOR_EVENT_PATTERNS = [re.compile(r"JUNIOR"), re.compile(r"JR"), re.compile(r"MIDDLE SCHOOL")]

SCULLING_PATTERN = re.compile(r"[1234]x")

BOAT_CLASS_PATTERNS = [
    (re.compile(r"PARA ?CANOE"), "PARACANOE"),
    (re.compile(r"\b(?:VL|KL|VA)\d\b"), None),
    (re.compile(r"\bOC\d{1,2}\b"), None),
    (re.compile(r"\bSUP\b"), "SUP"),
    (re.compile(r"\b[CK]\d{1,2}\b"), None),
    (re.compile(r"(?<![\d.])[1248][X+-]"), None),
    (re.compile(r"(?<![\d.])8(?!\d)"), "8+"),
]

DISTANCE_PATTERNS = [
    (re.compile(r"(\d+(?:\.\d+)?) ?KM\b", re.I), 1000),
    (re.compile(r"\b(\d{3,5}) ?M?\b", re.I), 1),
]
DEFAULT_DISTANCE = 200

EVENT_LEVEL_PATTERNS = [
    re.compile(r"bantam"),
    re.compile(r"juv"),
    re.compile(r"junior"),
    re.compile(r"senior"),
    re.compile(r"u23"),
    re.compile(r"masters ?[abc]"),
    re.compile(r"open"),
    re.compile(r"paracanoe"),
    re.compile(r" dev"),
]

UNKNOWN = "Unknown"


def strip_event_num(name, event_num):
    """'12 Womens K1 500' -> 'Womens K1 500' when the event number is '12'."""
    if event_num and name.startswith(event_num):
        return name[len(event_num):].strip()
    return name.strip()


def decode_event_name(name, event_num):
    """Split '1 Womens Varsity H1' into name 'Womens Varsity', bracket 'H1' and
    bracket type 'H'.

    Names with no recognized suffix are treated as a plain A final.
    """
    bracket = "FA"
    bracket_type = "FA"
    event_name = name[len(event_num):] if event_num else name

    for rule in BRACKET_RULES:
        match = rule.pattern.search(event_name)
        if not match:
            continue

        if rule.code == "Err":
            bracket_type = rule.code
            bracket = rule.index
        else:
            if isinstance(rule.index, str):
                index = rule.index
            else:
                found = rule.index.search(event_name)
                index = found.group(0) if found else "1"
            bracket = f"{rule.code}{index}".upper()
            bracket_type = bracket if rule.code == "TF" else rule.code

        event_name = event_name[:match.start()]
        break

    return EventName(event_name.strip(), bracket, bracket_type)


def get_final_level(name, event_num):
    """Return the final level ('A', 'B', ...) or '' if the event is not a final."""
    decoded = decode_event_name(name, event_num)
    if decoded.bracket != decoded.bracket_type:
        return ""
    return decoded.bracket[-1]


def is_a_final(name, event_num):
    return get_final_level(name, event_num) == "A"


def num_seats_from_name(event_name):
    """Number of athletes in each boat of the event, 1 when unknown."""
    for pattern, seats in SEAT_PATTERNS:
        if pattern.search(event_name):
            return seats
    return 1


def gender_from_event_name(event_name):
    name = event_name.upper()
    for pattern, gender in GENDER_PATTERNS:
        if pattern.search(name):
            return gender
    return Gender.UNKNOWN


def is_womens_event(event_name):
    name = event_name.upper()
    return any(p.search(name) for p in WOMENS_EVENT_PATTERNS)


def is_junior_event(event_name):
    name = event_name.upper()
    return any(p.search(name) for p in JUNIOR_EVENT_PATTERNS)


def is_sculling_event(event_name):
    return SCULLING_PATTERN.search(event_name) is not None


def is_exhibition_event(event_name):
    name = event_name.lower()
    return "exhib" in name or " dev" in name


def boat_class_from_name(event_name):
    """Boat class token such as 'K1', 'C4', 'OC6', '4x' or 'PARACANOE'."""
    name = event_name.upper()
    for pattern, boat_class in BOAT_CLASS_PATTERNS:
        match = pattern.search(name)
        if match:
            return (boat_class or match.group(0)).replace("X", "x")
    return UNKNOWN


def distance_from_name(event_name, default=DEFAULT_DISTANCE):
    """Race distance in metres."""
    for pattern, scale in DISTANCE_PATTERNS:
        match = pattern.search(event_name)
        if match:
            return int(float(match.group(1)) * scale)
    return default


def capitalize_first_letter(text):
    return text[:1].upper() + text[1:]


def uppercase_last_letter(text):
    return text[:-1] + text[-1:].upper()


def event_level_from_name(event_name):
    """Race level (Bantam, Junior, MastersB, ...) or 'Unknown'."""
    name = event_name.lower()
    for pattern in EVENT_LEVEL_PATTERNS:
        match = pattern.search(name)
        if not match:
            continue
        level = match.group(0).strip().replace(" ", "")
        if level == "juv":
            level = "juvenile"
        level = capitalize_first_letter(level).replace("canoe", "Canoe")
        if level.startswith("Masters"):
            level = uppercase_last_letter(level)
        return level
    return UNKNOWN


def root_team_name(crew_name, strip_seeding=False):
    """Trim a trailing A/B boat designator and optionally a seeding suffix.

    "Green Lake Crew B" -> "Green Lake Crew"
    "Rollins College [2]" -> "Rollins College" (strip_seeding=True)
    """
    if not strip_seeding:
        return re.sub(r" .$", "", crew_name.strip())
    crew_name = re.sub(r" .$", "", crew_name)
    crew_name = re.sub(r"\s+\[?.?\]?$", "", crew_name)
    return crew_name.strip()
