import uuid
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Tier(str, Enum):
    """Difficulty tiers, easiest first."""

    GRADE3 = "grade3"
    PRE2 = "pre2"
    GRADE2 = "grade2"
    PRE1 = "pre1"

    @property
    def label(self) -> str:
        return TIER_LABELS[self]


TIER_LABELS = {
    Tier.GRADE3: "英検3級",
    Tier.PRE2: "英検準2級",
    Tier.GRADE2: "英検2級",
    Tier.PRE1: "英検準1級",
}


class QuizState(str, Enum):
    SELECTING = "selecting"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AnswerOutcome(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


class Word(BaseModel):
    """
    A vocabulary entry. Words compare by id, so two entries with the same
    term and meaning are still distinct words.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    term: str
    meaning: str

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


class AnswerRecord(BaseModel):
    word: str
    user_answer: str
    correct_answer: str
    is_correct: bool


class QuestionView(BaseModel):
    term: str
    choices: List[str]
    question_number: int
    total_questions: int
    progress: str


class SessionStatus(BaseModel):
    state: QuizState
    tier: Optional[Tier] = None
    question_number: int
    total_questions: int
    is_complete: bool
