"""Shape vocabulary for symbol annotations.

Member names are the canonical tokens written in annotation files. Names
follow the SMuFL glyph naming used by the OMR dataset tools, so annotations
stay readable by other SMuFL-aware tooling.
"""

from enum import Enum


class OmrShape(str, Enum):
    """Enumeration of the music symbol shapes a classifier is trained on."""

    # Non-musical
    none = "none"

    # Staff brackets and lines
    brace = "brace"
    bracketTop = "bracketTop"
    bracketBottom = "bracketBottom"
    legerLine = "legerLine"
    stem = "stem"

    # Barlines and repeats
    barlineSingle = "barlineSingle"
    barlineDouble = "barlineDouble"
    barlineFinal = "barlineFinal"
    barlineReverseFinal = "barlineReverseFinal"
    repeatDot = "repeatDot"
    repeatLeft = "repeatLeft"
    repeatRight = "repeatRight"
    repeatRightLeft = "repeatRightLeft"
    segno = "segno"
    coda = "coda"

    # Clefs
    gClef = "gClef"
    gClef8vb = "gClef8vb"
    gClef8va = "gClef8va"
    gClefChange = "gClefChange"
    cClefAlto = "cClefAlto"
    cClefTenor = "cClefTenor"
    cClefAltoChange = "cClefAltoChange"
    fClef = "fClef"
    fClef8vb = "fClef8vb"
    fClefChange = "fClefChange"
    unpitchedPercussionClef1 = "unpitchedPercussionClef1"
    clef8 = "clef8"
    clef15 = "clef15"

    # Time signatures
    timeSig0 = "timeSig0"
    timeSig1 = "timeSig1"
    timeSig2 = "timeSig2"
    timeSig3 = "timeSig3"
    timeSig4 = "timeSig4"
    timeSig5 = "timeSig5"
    timeSig6 = "timeSig6"
    timeSig7 = "timeSig7"
    timeSig8 = "timeSig8"
    timeSig9 = "timeSig9"
    timeSig12 = "timeSig12"
    timeSig16 = "timeSig16"
    timeSigCommon = "timeSigCommon"
    timeSigCutCommon = "timeSigCutCommon"

    # Note heads
    noteheadBlack = "noteheadBlack"
    noteheadBlackSmall = "noteheadBlackSmall"
    noteheadHalf = "noteheadHalf"
    noteheadHalfSmall = "noteheadHalfSmall"
    noteheadWhole = "noteheadWhole"
    noteheadWholeSmall = "noteheadWholeSmall"
    noteheadDoubleWhole = "noteheadDoubleWhole"
    noteheadDoubleWholeSmall = "noteheadDoubleWholeSmall"
    augmentationDot = "augmentationDot"

    # Beams and flags
    beam = "beam"
    beamHook = "beamHook"
    flag8thUp = "flag8thUp"
    flag8thUpSmall = "flag8thUpSmall"
    flag16thUp = "flag16thUp"
    flag32ndUp = "flag32ndUp"
    flag64thUp = "flag64thUp"
    flag8thDown = "flag8thDown"
    flag16thDown = "flag16thDown"
    flag32ndDown = "flag32ndDown"
    flag64thDown = "flag64thDown"
    graceNoteAcciaccaturaStemUp = "graceNoteAcciaccaturaStemUp"
    graceNoteAppoggiaturaStemUp = "graceNoteAppoggiaturaStemUp"

    # Rests
    restMaxima = "restMaxima"
    restLonga = "restLonga"
    restDoubleWhole = "restDoubleWhole"
    restWhole = "restWhole"
    restHalf = "restHalf"
    restQuarter = "restQuarter"
    rest8th = "rest8th"
    rest16th = "rest16th"
    rest32nd = "rest32nd"
    rest64th = "rest64th"
    rest128th = "rest128th"
    restHNr = "restHNr"

    # Accidentals and key signatures
    accidentalFlat = "accidentalFlat"
    accidentalFlatSmall = "accidentalFlatSmall"
    accidentalNatural = "accidentalNatural"
    accidentalNaturalSmall = "accidentalNaturalSmall"
    accidentalSharp = "accidentalSharp"
    accidentalSharpSmall = "accidentalSharpSmall"
    accidentalDoubleSharp = "accidentalDoubleSharp"
    accidentalDoubleFlat = "accidentalDoubleFlat"
    keyFlat = "keyFlat"
    keyNatural = "keyNatural"
    keySharp = "keySharp"

    # Articulations
    articAccentAbove = "articAccentAbove"
    articAccentBelow = "articAccentBelow"
    articStaccatoAbove = "articStaccatoAbove"
    articStaccatoBelow = "articStaccatoBelow"
    articTenutoAbove = "articTenutoAbove"
    articTenutoBelow = "articTenutoBelow"
    articStaccatissimoAbove = "articStaccatissimoAbove"
    articStaccatissimoBelow = "articStaccatissimoBelow"
    articMarcatoAbove = "articMarcatoAbove"
    articMarcatoBelow = "articMarcatoBelow"

    # Holds and pauses
    fermataAbove = "fermataAbove"
    fermataBelow = "fermataBelow"
    breathMarkComma = "breathMarkComma"
    caesura = "caesura"

    # Dynamics
    dynamicPiano = "dynamicPiano"
    dynamicMezzo = "dynamicMezzo"
    dynamicForte = "dynamicForte"
    dynamicPP = "dynamicPP"
    dynamicMP = "dynamicMP"
    dynamicMF = "dynamicMF"
    dynamicFF = "dynamicFF"
    dynamicSforzando1 = "dynamicSforzando1"
    dynamicFortePiano = "dynamicFortePiano"
    dynamicCrescendoHairpin = "dynamicCrescendoHairpin"
    dynamicDiminuendoHairpin = "dynamicDiminuendoHairpin"

    # Ornaments
    ornamentTrill = "ornamentTrill"
    ornamentTurn = "ornamentTurn"
    ornamentTurnInverted = "ornamentTurnInverted"
    ornamentMordent = "ornamentMordent"
    ornamentShortTrill = "ornamentShortTrill"
    arpeggiato = "arpeggiato"

    # Tuplets
    tuplet3 = "tuplet3"
    tuplet6 = "tuplet6"

    # Fingering
    fingering0 = "fingering0"
    fingering1 = "fingering1"
    fingering2 = "fingering2"
    fingering3 = "fingering3"
    fingering4 = "fingering4"
    fingering5 = "fingering5"

    # Piano pedals
    keyboardPedalPed = "keyboardPedalPed"
    keyboardPedalUp = "keyboardPedalUp"

    # Ties and slurs
    slur = "slur"
    tie = "tie"

    def __str__(self) -> str:
        return self.name
