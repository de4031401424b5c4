"""
Question Catalog
Static, read-only question bank keyed by category and difficulty
FILE: quiz_mcp/data/question_catalog.py
"""
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from quiz_mcp.models.quiz import Category, Difficulty, QuestionEntry


class CatalogError(Exception):
    """Raised when a catalog does not cover every category/difficulty pair"""
    pass


Pool = Tuple[QuestionEntry, ...]


def _q(question: str, answer: str) -> QuestionEntry:
    return QuestionEntry(question=question, answer=answer)


QUIZ_QUESTIONS: Dict[Category, Dict[Difficulty, Sequence[QuestionEntry]]] = {
    Category.GENERAL: {
        Difficulty.EASY: [
            _q("What is the capital of France?", "Paris"),
            _q("Which planet is known as the Red Planet?", "Mars"),
            _q("How many continents are there on Earth?", "7"),
        ],
        Difficulty.MEDIUM: [
            _q("In which year did World War II end?", "1945"),
            _q("Who painted the Mona Lisa?", "Leonardo da Vinci"),
            _q("What is the chemical symbol for gold?", "Au"),
        ],
        Difficulty.HARD: [
            _q("What is the smallest prime number greater than 100?", "101"),
            _q("Which element has the atomic number 79?", "Gold"),
            _q("Who wrote 'War and Peace'?", "Leo Tolstoy"),
        ],
    },
    Category.SCIENCE: {
        Difficulty.EASY: [
            _q("What is H2O commonly known as?", "Water"),
            _q("What force pulls objects toward the Earth?", "Gravity"),
            _q("What is the largest organ in the human body?", "Skin"),
        ],
        Difficulty.MEDIUM: [
            _q("What is the process by which plants make food called?", "Photosynthesis"),
            _q("What is the hardest natural substance on Earth?", "Diamond"),
            _q("What is the chemical symbol for sodium?", "Na"),
        ],
        Difficulty.HARD: [
            _q("What particle has the same mass as an electron but positive charge?", "Positron"),
            _q("Which planet has the most moons?", "Saturn"),
            _q(
                "What is the name of the process whereby solid dry ice changes directly to gas?",
                "Sublimation",
            ),
        ],
    },
    Category.HISTORY: {
        Difficulty.EASY: [
            _q("Who was the first President of the United States?", "George Washington"),
            _q("In which year did the Titanic sink?", "1912"),
            _q(
                "What was the name of the first artificial satellite launched into space?",
                "Sputnik 1",
            ),
        ],
        Difficulty.MEDIUM: [
            _q(
                "Who was the Egyptian queen who allied with Julius Caesar and Mark Antony?",
                "Cleopatra",
            ),
            _q("Which empire was ruled by Genghis Khan?", "Mongol Empire"),
            _q("In which year did the Berlin Wall fall?", "1989"),
        ],
        Difficulty.HARD: [
            _q("Who was the founder of the Ottoman Empire?", "Osman I"),
            _q("Which battle in 1815 marked the final defeat of Napoleon Bonaparte?", "Battle of Waterloo"),
            _q("Who was the first Emperor of China?", "Qin Shi Huang"),
        ],
    },
    Category.GEOGRAPHY: {
        Difficulty.EASY: [
            _q("What is the largest ocean on Earth?", "Pacific Ocean"),
            _q("What is the largest desert in the world?", "Sahara Desert"),
            _q("What is the name of the longest river in Africa?", "Nile"),
        ],
        Difficulty.MEDIUM: [
            _q("What is the capital of Canada?", "Ottawa"),
            _q("Which mountain range separates Europe from Asia?", "Ural Mountains"),
            _q("Which country has the largest population in the world?", "China"),
        ],
        Difficulty.HARD: [
            _q("What is the smallest country in the world by land area?", "Vatican City"),
            _q("Which city is located on two continents?", "Istanbul"),
            _q("What is the capital of New Zealand?", "Wellington"),
        ],
    },
    Category.ENTERTAINMENT: {
        Difficulty.EASY: [
            _q("Who played Harry Potter in the Harry Potter movies?", "Daniel Radcliffe"),
            _q("What is the name of Mickey Mouse's pet dog?", "Pluto"),
            _q("Who painted the Starry Night?", "Vincent van Gogh"),
        ],
        Difficulty.MEDIUM: [
            _q("Which band performed the album 'Dark Side of the Moon'?", "Pink Floyd"),
            _q("Who directed the movie 'Jaws'?", "Steven Spielberg"),
            _q("Which actor played Iron Man in the Marvel Cinematic Universe?", "Robert Downey Jr."),
        ],
        Difficulty.HARD: [
            _q("Who won the Best Actress Oscar Award in 2020?", "Renée Zellweger"),
            _q("In the TV show Friends, what was the name of Ross's second wife?", "Emily"),
            _q("Who composed the opera 'The Marriage of Figaro'?", "Wolfgang Amadeus Mozart"),
        ],
    },
}


class QuestionCatalog:
    """
    Immutable two-level question bank

    The catalog is total over Category x Difficulty: construction fails with
    CatalogError if any pair is missing. Pools are copied into tuples and the
    mapping is wrapped read-only, so a catalog never changes after it is built.
    Pools are allowed to be empty here; drawing from an empty pool is the
    selector's error to report.
    """

    def __init__(self, questions: Mapping[Category, Mapping[Difficulty, Sequence[QuestionEntry]]]):
        frozen: Dict[Category, Mapping[Difficulty, Pool]] = {}

        for category in Category:
            by_difficulty = questions.get(category)
            if by_difficulty is None:
                raise CatalogError(f"Catalog has no entries for category '{category.value}'")

            pools: Dict[Difficulty, Pool] = {}
            for difficulty in Difficulty:
                if difficulty not in by_difficulty:
                    raise CatalogError(
                        f"Catalog has no pool for category '{category.value}', "
                        f"difficulty '{difficulty.value}'"
                    )
                pools[difficulty] = tuple(by_difficulty[difficulty])

            frozen[category] = MappingProxyType(pools)

        self._questions: Mapping[Category, Mapping[Difficulty, Pool]] = MappingProxyType(frozen)

    def lookup(self, category: Category, difficulty: Difficulty) -> Pool:
        """
        Get the pool of questions for a category/difficulty pair

        Args:
            category: Question category
            difficulty: Question difficulty

        Returns:
            Ordered tuple of QuestionEntry values (non-empty for the built-in catalog)
        """
        return self._questions[category][difficulty]

    def categories(self) -> Tuple[Category, ...]:
        return tuple(self._questions)

    def difficulties(self) -> Tuple[Difficulty, ...]:
        return tuple(Difficulty)

    def pool_sizes(self) -> Dict[str, int]:
        """Number of questions per 'category/difficulty' key"""
        return {
            f"{category.value}/{difficulty.value}": len(pool)
            for category, pools in self._questions.items()
            for difficulty, pool in pools.items()
        }

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        category, difficulty = pair
        return category in self._questions and difficulty in self._questions[category]

    def __iter__(self) -> Iterator[Tuple[Category, Difficulty, Pool]]:
        for category, pools in self._questions.items():
            for difficulty, pool in pools.items():
                yield category, difficulty, pool

    def __len__(self) -> int:
        return sum(len(pool) for _, _, pool in self)


def get_default_catalog() -> QuestionCatalog:
    """Catalog built from the bundled QUIZ_QUESTIONS table"""
    return _DEFAULT_CATALOG


_DEFAULT_CATALOG = QuestionCatalog(QUIZ_QUESTIONS)
