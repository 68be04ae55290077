from __future__ import annotations

ALPHABETS: dict[str, str] = {
    "numeric": "1234567890",
    "abcd": "abcd",
    "qwerty": "asdfqwerzxcvjklmiuopghtybn",
    "qwerty-homerow": "asdfjklgh",
    "qwerty-left-hand": "asdfqwerzcxv",
    "qwerty-right-hand": "jkluiopmyhn",
    "azerty": "qsdfazerwxcvjklmuiopghtybn",
    "azerty-homerow": "qsdfjkmgh",
    "azerty-left-hand": "qsdfazerwxcv",
    "azerty-right-hand": "jklmuiophyn",
    "qwertz": "asdfqweryxcvjkluiopmghtzbn",
    "qwertz-homerow": "asdfghjkl",
    "qwertz-left-hand": "asdfqweryxcv",
    "qwertz-right-hand": "jkluiopmhzn",
    "dvorak": "aoeuqjkxpyhtnsgcrlmwvzfidb",
    "dvorak-homerow": "aoeuhtnsid",
    "dvorak-left-hand": "aoeupqjkyix",
    "dvorak-right-hand": "htnsgcrlmwvz",
    "colemak": "arstqwfpzxcvneioluymdhgjbk",
    "colemak-homerow": "arstneiodh",
    "colemak-left-hand": "arstqwfpzxcv",
    "colemak-right-hand": "neioluymjhk",
}


class UnknownAlphabetError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown alphabet {name!r} (choose from: {', '.join(ALPHABETS)})"
        )
        self.name = name


class Alphabet:
    def __init__(self, letters: str) -> None:
        self.letters: list[str] = list(letters)

    def hints(self, count: int) -> list[str]:
        """Return up to *count* distinct hints, shortest first.

        Single letters are used while they suffice.  Beyond that, letters
        are taken from the end of the alphabet and turned into two-letter
        prefixes (``d`` becomes ``da``, ``db``, ...), so the most reachable
        keys stay single.  At most ``len(letters) ** 2`` hints exist.
        """
        expansion = list(self.letters)
        expanded: list[str] = []

        while expansion and len(expansion) + len(expanded) < count:
            prefix = expansion.pop()
            wanted = count - len(expansion) - len(expanded)
            expanded[0:0] = [prefix + letter for letter in self.letters[:wanted]]

        return expansion[: max(count - len(expanded), 0)] + expanded


def get_alphabet(name: str) -> Alphabet:
    try:
        return Alphabet(ALPHABETS[name])
    except KeyError:
        raise UnknownAlphabetError(name) from None


def generate(alphabet_id: str, count: int) -> list[str]:
    return get_alphabet(alphabet_id).hints(count)
