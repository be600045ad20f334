import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import exam_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from exam_toolkit.builder.layout.config import LayoutConfig  # noqa: E402
from exam_toolkit.builder.output.backend import PdfBackend  # noqa: E402
from exam_toolkit.core.models import Difficulty, Question  # noqa: E402

# Fake metric: every character is this many mm wide per point of font size
CHAR_WIDTH_PER_PT = 0.2


def fake_measure(text: str, font_name: str, font_size: float) -> float:
    """Deterministic width function: monospace, font-independent."""
    return len(text) * font_size * CHAR_WIDTH_PER_PT


class FakeBackend(PdfBackend):
    """PdfBackend that records drawing calls instead of producing a PDF."""

    def __init__(self, config: LayoutConfig) -> None:
        self.config = config
        self.page = 0
        self.strings = []  # (page, x, y, text, font_name, font_size)
        self.lines = []  # (page, x1, y1, x2, y2, line_width)
        self.finished = False

    @property
    def page_size(self):
        return (self.config.page_width, self.config.page_height)

    def string_width(self, text, font_name, font_size):
        return fake_measure(text, font_name, font_size)

    def draw_string(self, x, y, text, font_name, font_size):
        self.strings.append((self.page, x, y, text, font_name, font_size))

    def draw_line(self, x1, y1, x2, y2, line_width):
        self.lines.append((self.page, x1, y1, x2, y2, line_width))

    def new_page(self):
        self.page += 1

    def finish(self):
        self.finished = True
        return b"%PDF-1.4 fake"

    @property
    def page_count(self):
        return self.page + 1

    def texts(self, page=None):
        return [s[3] for s in self.strings if page is None or s[0] == page]


@pytest.fixture
def measure():
    return fake_measure


@pytest.fixture
def layout_config():
    """Default layout without header or footer, so content starts at the top margin."""
    return LayoutConfig(include_header=False, show_footer=False)


@pytest.fixture
def mcq_question():
    return Question(
        id="q1",
        stem="What is the capital of France?",
        options=("London", "Paris", "Berlin", "Madrid"),
        answer="The second choice",
        explanation="It has been the seat of government for centuries.",
        difficulty=Difficulty.BEGINNER,
        subject="Geography",
    )


@pytest.fixture
def subjective_question():
    return Question(
        id="q2",
        stem="Describe the water cycle.",
        answer="Evaporation, condensation and precipitation repeat.",
        explanation=None,
        difficulty=Difficulty.AMATEUR,
        subject="Science",
    )


@pytest.fixture
def sample_questions(mcq_question, subjective_question):
    """Two questions whose stems, options, answers and explanations are all distinct."""
    return [mcq_question, subjective_question]


@pytest.fixture
def question_payload():
    """Valid question payload as it arrives in JSON."""
    return {
        "id": "gen-1",
        "stem": "Which gas do plants absorb?",
        "options": ["Oxygen", "Carbon dioxide", "Nitrogen", "Helium"],
        "answer": "Carbon dioxide",
        "explanation": "Plants use it for photosynthesis.",
        "difficulty": "Ninja",
        "subject": "Biology",
    }


@pytest.fixture
def fake_backends():
    """Backend factory that keeps every FakeBackend it creates in .created."""
    created = []

    def factory(config):
        backend = FakeBackend(config)
        created.append(backend)
        return backend

    factory.created = created
    factory.backend_class = FakeBackend
    return factory
