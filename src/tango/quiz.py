import logging
import random
from typing import List, Optional, Set, Tuple

from .config import settings
from .models import AnswerOutcome, AnswerRecord, QuizState, Tier, Word
from .vocabulary import WordCatalog

logger = logging.getLogger(__name__)


class QuizStateError(RuntimeError):
    """Raised when session operations are called out of order."""


class QuizSession:
    """
    One learner's quiz run over a single tier.

    Words are drawn without replacement, so no word repeats within a run. The
    run ends after ``total_questions`` answers or when the tier runs out of
    unseen words, whichever comes first.

    ``answer`` only grades; the caller shows feedback for as long as it likes
    and then calls ``advance`` to move on.
    """

    def __init__(
        self,
        catalog: WordCatalog,
        total_questions: Optional[int] = None,
        choice_count: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        self.catalog = catalog
        self.total_questions = total_questions or settings.TOTAL_QUESTIONS
        self.choice_count = choice_count or settings.CHOICE_COUNT
        self.rng = rng or random.Random()

        self.state = QuizState.SELECTING
        self.tier: Optional[Tier] = None
        self.active_word_pool: Tuple[Word, ...] = ()
        self.consumed_ids: Set[str] = set()
        self.question_index = 0
        self.current_word: Optional[Word] = None
        self.choices: List[str] = []
        self.last_outcome: Optional[AnswerOutcome] = None

    # --- Core operations ---

    def start(self, tier: Tier):
        self.tier = Tier(tier)
        self.active_word_pool = self.catalog.words_for(self.tier)
        self.consumed_ids = set()
        self.question_index = 0
        self.current_word = None
        self.choices = []
        self.last_outcome = None
        self.state = QuizState.IN_PROGRESS
        logger.info(
            f"Quiz started [Tier: {self.tier.value}]", extra={"tier": self.tier.value}
        )

    def next_question(self) -> Optional[Word]:
        if self.state == QuizState.SELECTING:
            return None

        unconsumed = [w for w in self.active_word_pool if w.id not in self.consumed_ids]
        if (
            not unconsumed
            or self.question_index >= self.total_questions
            or len(self.consumed_ids) >= self.total_questions
        ):
            self._complete()
            return None

        word = self.rng.choice(unconsumed)
        self.consumed_ids.add(word.id)
        self.current_word = word
        self.choices = self.generate_choices(word)
        self.last_outcome = None
        return word

    def generate_choices(self, word: Word) -> List[str]:
        others = [w.meaning for w in self.active_word_pool if w != word]
        distractors = self.rng.sample(others, min(self.choice_count - 1, len(others)))
        choices = [word.meaning] + distractors
        self.rng.shuffle(choices)
        return choices

    def submit_answer(self, choice: str) -> AnswerOutcome:
        if self.current_word is None:
            raise QuizStateError("There is no question to answer")
        if self.last_outcome is not None:
            raise QuizStateError("This question has already been answered")

        if choice == self.current_word.meaning:
            self.last_outcome = AnswerOutcome.CORRECT
        else:
            self.last_outcome = AnswerOutcome.INCORRECT
        return self.last_outcome

    def advance(self) -> Optional[Word]:
        if self.current_word is None or self.last_outcome is None:
            raise QuizStateError("Answer the current question before advancing")

        self.question_index += 1
        if self.question_index >= self.total_questions:
            self._complete()
            return None
        return self.next_question()

    def reset(self):
        self.state = QuizState.SELECTING
        self.tier = None
        self.active_word_pool = ()
        self.consumed_ids = set()
        self.question_index = 0
        self.current_word = None
        self.choices = []
        self.last_outcome = None

    def _complete(self):
        if self.state != QuizState.COMPLETED:
            logger.info(
                f"Quiz completed [Tier: {self.tier.value}, "
                f"Shown: {len(self.consumed_ids)}]",
                extra={"tier": self.tier.value},
            )
        self.state = QuizState.COMPLETED
        self.current_word = None
        self.choices = []

    # --- Presentation surface ---

    def select_tier(self, tier: Tier) -> Optional[Word]:
        self.start(tier)
        return self.next_question()

    def current_question(self) -> Optional[Word]:
        return self.current_word

    def current_choices(self) -> List[str]:
        return list(self.choices)

    def answer(self, choice: str) -> AnswerRecord:
        outcome = self.submit_answer(choice)
        return AnswerRecord(
            word=self.current_word.term,
            user_answer=choice,
            correct_answer=self.current_word.meaning,
            is_correct=outcome == AnswerOutcome.CORRECT,
        )

    def is_complete(self) -> bool:
        return self.state == QuizState.COMPLETED

    def restart(self):
        self.reset()

    @property
    def question_number(self) -> int:
        """1-based number of the question on screen."""
        return min(self.question_index + 1, self.total_questions)

    @property
    def progress_label(self) -> str:
        return f"第 {self.question_number} 問 / 全 {self.total_questions} 問"
