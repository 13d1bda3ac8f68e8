"""English base-form (lemma) lookup for single words."""

from __future__ import annotations

from collections.abc import Mapping

_VOWELS = frozenset("aeiou")

# Each line: the base form followed by its irregular forms.
_IRREGULAR_VERBS = """
be am is are was were been being
have has had having
do does did done doing
go goes went gone going
eat ate eaten
run ran
say said
make made
take took taken
come came
see saw seen
know knew known
get got gotten
give gave given
find found
think thought
tell told
become became
leave left
feel felt
bring brought
begin began begun
keep kept
hold held
write wrote written
stand stood
hear heard
mean meant
meet met
pay paid
sit sat
speak spoke spoken
lead led
grow grew grown
lose lost
fall fell fallen
send sent
build built
understand understood
draw drew drawn
break broke broken
spend spent
drive drove driven
buy bought
wear wore worn
choose chose chosen
seek sought
throw threw thrown
catch caught
teach taught
fight fought
sell sold
fly flew flown
forget forgot forgotten
risen risen
sing sang sung
swim swam swum
drink drank drunk
ride rode ridden
shake shook shaken
steal stole stolen
sleep slept
win won
hide hid hidden
bite bitten
forgive forgave forgiven
freeze froze frozen
wake woke woken
hang hung
dig dug
feed fed
stick stuck
strike struck
swear swore sworn
tear tore torn
bear bore born borne
blow blew blown
lend lent
bend bent
bleed bled
breed bred
flee fled
shoot shot
slide slid
spin spun
arise arose arisen
awake awoke awoken
bind bound
deal dealt
weep wept
creep crept
sweep swept
kneel knelt
swing swung
sting stung
mistake mistook mistaken
undertake undertook undertaken
overcome overcame
withdraw withdrew withdrawn
die dying
lie lying
tie tying
"""

_IRREGULAR_NOUNS = """
child children
man men
woman women
person people
mouse mice
goose geese
foot feet
tooth teeth
ox oxen
louse lice
knife knives
wife wives
wolf wolves
shelf shelves
thief thieves
half halves
calf calves
loaf loaves
crisis crises
analysis analyses
thesis theses
criterion criteria
phenomenon phenomena
cactus cacti
fungus fungi
nucleus nuclei
radius radii
"""

# Words that look inflected but are already base forms.
_BASE_WORDS = frozenset(
    """
    this his its yes bus gas plus thus always perhaps news series species
    physics mathematics economics politics ethics lens atlas canvas chaos
    bias alias cosmos sometimes besides towards afterwards upwards downwards
    backwards forwards themselves ourselves yourselves
    need seed speed feed breed bleed greed deed weed indeed succeed proceed
    exceed hundred naked sacred wicked kindred rugged ragged wretched crooked
    morning evening during nothing something anything everything ceiling
    wedding pudding darling sibling earring herring shilling stocking sterling
    """.split()
)


def _parse_table(*tables: str) -> dict[str, str]:
    forms: dict[str, str] = {}
    for table in tables:
        for line in table.strip().splitlines():
            lemma, *inflected = line.split()
            for form in inflected:
                forms[form] = lemma
    return forms


_IRREGULAR_FORMS = _parse_table(_IRREGULAR_VERBS, _IRREGULAR_NOUNS)


def _has_vowel(text: str) -> bool:
    return any(char in _VOWELS or char == "y" for char in text)


def _vowel_groups(text: str) -> int:
    groups = 0
    previous_vowel = False
    for char in text:
        is_vowel = char in _VOWELS
        if is_vowel and not previous_vowel:
            groups += 1
        previous_vowel = is_vowel
    return groups


def _ends_consonant_vowel_consonant(stem: str) -> bool:
    if len(stem) < 2:
        return False
    last, vowel = stem[-1], stem[-2]
    if last in _VOWELS or last in "wxy" or vowel not in _VOWELS:
        return False
    return len(stem) == 2 or stem[-3] not in _VOWELS


def _restore_stem(stem: str) -> str:
    """Undo the spelling changes made before an -ing or -ed ending."""
    if (
        len(stem) >= 4
        and stem[-1] == stem[-2]
        and stem[-1] not in _VOWELS
        and stem[-1] not in "lsfz"
        and stem[-3] in _VOWELS
        and stem[-4] not in _VOWELS
    ):
        return stem[:-1]
    if stem[-1] in "uvc" or stem.endswith(("iz", "dg", "rg")):
        return stem + "e"
    if stem.endswith("ur") and len(stem) >= 3 and stem[-3] not in _VOWELS:
        return stem + "e"
    if _ends_consonant_vowel_consonant(stem) and _vowel_groups(stem) == 1:
        return stem + "e"
    return stem


def _strip_suffix(word: str) -> str | None:
    """Return the base form of a regularly inflected lower-case word, if any."""
    if word.endswith("ing") and len(word) > 4:
        stem = word[:-3]
        return _restore_stem(stem) if _has_vowel(stem) else None
    if word.endswith("ied") and len(word) > 3:
        return word[:-3] + "y" if len(word) > 4 else word[:-1]
    if word.endswith("eed") and len(word) > 3:
        return word[:-1]
    if word.endswith("ed") and len(word) > 3:
        stem = word[:-2]
        return _restore_stem(stem) if _has_vowel(stem) else None
    if (
        word.endswith("s")
        and len(word) > 3
        and not word.endswith(("ss", "us", "is", "ous"))
    ):
        if word.endswith("ies"):
            return word[:-3] + "y" if len(word) > 4 else word[:-1]
        if word.endswith(("sses", "xes", "zzes", "ches", "shes")):
            return word[:-2]
        if word.endswith("oes"):
            return word[:-2] if len(word) > 5 else word[:-1]
        return word[:-1]
    return None


class Dictionary:
    """Finds the base form of English words."""

    def __init__(self, extra_forms: Mapping[str, str] | None = None) -> None:
        self._forms = dict(_IRREGULAR_FORMS)
        if extra_forms:
            self._forms.update(
                {form.lower(): lemma for form, lemma in extra_forms.items()}
            )

    def _lemma(self, token: str) -> str:
        lower = token.lower()
        if lower in self._forms:
            return self._forms[lower]
        if "-" in token or not token.isalpha() or lower in _BASE_WORDS:
            return token
        stripped = _strip_suffix(lower)
        if stripped is None or stripped == lower:
            return token
        return stripped

    def get_base_form(self, word: str) -> str | None:
        """Return the base form of ``word``.

        A word already in its base form is returned as it is. ``None`` is
        returned for empty input and when no single base form can be chosen.
        """
        lemmas: list[str] = []
        for token in word.split():
            lemma = self._lemma(token)
            if lemma not in lemmas:
                lemmas.append(lemma)
        if len(lemmas) == 1:
            return lemmas[0]
        if len(lemmas) == 2:
            return next(lemma for lemma in lemmas if lemma != word)
        return None