"""
Static lookup data for decoding item attributes.

Maps the numeric codes found in item exports (skill, element, equipment
slots, flags and jobs) to human-readable names. All tables are read-only
and shared process-wide.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ElementInfo:
    """Element name and the colour used to display it."""
    name: str
    color: str  # rich colour name


@dataclass(frozen=True)
class FlagInfo:
    """A single item flag bit."""
    name: str
    value: int


SKILLS: Mapping[int, str] = MappingProxyType({
    0x0000: "SKILL: PetItem/Non Throwable ammo/Grip",
    0x0001: "SKILL: HandToHand",
    0x0002: "SKILL: Dagger",
    0x0003: "SKILL: Sword",
    0x0004: "SKILL: Greatsword",
    0x0005: "SKILL: Axe",
    0x0006: "SKILL: Greataxe",
    0x0007: "SKILL: Scythe",
    0x0008: "SKILL: Polearm",
    0x0009: "SKILL: Katana",
    0x000A: "SKILL: Greatkatana",
    0x000B: "SKILL: Club",
    0x000C: "SKILL: Staff",
    0x0019: "SKILL: Bow/Arrow",
    0x001A: "SKILL: Marksmanship",
    0x001B: "SKILL: Throwing",
    0x002A: "SKILL: Horn/Flute",
    0x0029: "SKILL: Harp",
    0x0030: "SKILL: FishingRod/Bait",
})

ELEMENTS: Mapping[int, ElementInfo] = MappingProxyType({
    0: ElementInfo("Fire", "orange_red1"),
    1: ElementInfo("Ice", "sky_blue1"),
    2: ElementInfo("Wind", "green3"),
    3: ElementInfo("Earth", "sienna"),
    4: ElementInfo("Lightning", "yellow"),
    5: ElementInfo("Water", "blue"),
    6: ElementInfo("Light", "white"),
    7: ElementInfo("Dark", "purple"),
})

SLOTS: Mapping[int, str] = MappingProxyType({
    0x0001: "Main Hand",
    0x0002: "Sub Hand",
    0x0004: "Ranged",
    0x0008: "Ammo",
    0x0010: "Head",
    0x0020: "Body",
    0x0040: "Hands",
    0x0080: "Legs",
    0x0100: "Feet",
    0x0200: "Neck",
    0x0400: "Waist",
    0x0800: "Left Ear",
    0x1000: "Right Ear",
    0x2000: "Left Ring",
    0x4000: "Right Ring",
    0x8000: "Back",
})

# Ordered: set flags are reported in this order
FLAGS: Tuple[FlagInfo, ...] = (
    FlagInfo("WALLHANGING", 0x0001),
    FlagInfo("ITEM FLAG 01", 0x0002),
    FlagInfo("AVAILABLE FROM MYSTERY BOX (GOBBIE BOX ECT.)", 0x0004),
    FlagInfo("AVAILABLE FROM MOG GARDEN", 0x0008),
    FlagInfo("CAN MAIL TO SAME ACCOUNT", 0x0010),
    FlagInfo("INSCRIBABLE", 0x0020),
    FlagInfo("CANNOT PUT UP FOR AUCTION", 0x0040),
    FlagInfo("ITEM IS A SCROLL", 0x0080),
    FlagInfo("LINKSHELL (PEARL/SACK)", 0x0100),
    FlagInfo("CAN USE ITEM (EXAMPLE: CHARGED ITEMS)", 0x0200),
    FlagInfo("CAN TRADE TO AN NPC", 0x0400),
    FlagInfo("CAN EQUIP ITEM", 0x0800),
    FlagInfo("NOT SELABLE", 0x1000),
    FlagInfo("NO DELIVERY FROM AH", 0x2000),
    FlagInfo("EX", 0x4000),
    FlagInfo("RARE", 0x8000),
)

NOT_SELABLE = next(flag.value for flag in FLAGS if flag.name == "NOT SELABLE")

JOBS = (
    "WAR", "MNK", "WHM", "BLM", "RDM", "THF", "PLD", "DRK", "BST", "BRD", "RNG",
    "SAM", "NIN", "DRG", "SMN", "BLU", "COR", "PUP", "DNC", "SCH", "GEO", "RUN",
)

# Bit used by the export's hex "jobs" field
JOB_BITS: Mapping[str, int] = MappingProxyType(
    {job: 1 << index for index, job in enumerate(JOBS)}
)

# Weight used by the item_basic job requirement column
JOB_LSB_WEIGHTS: Mapping[str, int] = MappingProxyType({
    "WAR": 1,
    "MNK": 2,
    "WHM": 4,
    "BLM": 8,
    "RDM": 16,
    "THF": 32,
    "PLD": 64,
    "DRK": 128,
    "BST": 256,
    "BRD": 512,
    "RNG": 1024,
    "SAM": 2048,
    "NIN": 4096,
    "DRG": 8192,
    "SMN": 16384,
    "BLU": 32768,
    "COR": 65536,
    "PUP": 131072,
    "DNC": 262144,
    "SCH": 524288,
    "GEO": 1048576,
    "RUN": 2097152,
})


_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


def parse_hex(value: Optional[str]) -> Optional[int]:
    """
    Parse a hexadecimal attribute value.

    Accepts surrounding whitespace and an optional ``0x`` prefix.

    Args:
        value: Raw attribute text

    Returns:
        Parsed integer, or None if the value is empty or not hexadecimal
    """
    if value is None:
        return None
    text = value.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    # Digits only: int() would also take a sign or underscores
    if not _HEX_DIGITS.fullmatch(text):
        return None
    return int(text, 16)


def skill_name(code: int) -> Optional[str]:
    """Get skill description for a code."""
    return SKILLS.get(code)


def element_info(code: int) -> Optional[ElementInfo]:
    """Get element name and colour for a code."""
    return ELEMENTS.get(code)


def slot_name(code: int) -> Optional[str]:
    """Get equipment slot name for a slot value."""
    return SLOTS.get(code)


def enabled_flags(value: int) -> List[str]:
    """Names of all flags set in value, in table order."""
    return [flag.name for flag in FLAGS if value & flag.value]


def enabled_jobs(value: int) -> List[str]:
    """Names of all jobs whose bit is set in value, in table order."""
    return [job for job, bit in JOB_BITS.items() if value & bit]


def combined_lsb_bitmask(job_names: Iterable[str]) -> int:
    """
    Combine per-job LSB weights into a single value.

    Weights are summed, not OR-ed: a job listed twice counts twice.
    Unknown job names contribute nothing.
    """
    return sum(JOB_LSB_WEIGHTS.get(job, 0) for job in job_names)
