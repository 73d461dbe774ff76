"""Tests for the menu and the interactive study loop."""

from question_time.engine import Phase, QuestionBankEngine
from question_time.menu import PROMPT, QUIT_MESSAGE, NamedMenuOption, choose_menu
from question_time.models import Question, QuestionBank, StudyDeckResult
from question_time.sentiment import naive_classifier
from question_time.study import JUDGE_PROMPT, REVEAL_PROMPT, render, step, study_bank


def scripted(*responses):
    """Input function replaying the given responses in order."""
    it = iter(responses)
    return lambda: next(it)


class Transcript:
    def __init__(self):
        self.lines = []

    def __call__(self, line):
        self.lines.append(line)


APPLE = NamedMenuOption(1, "Apple")
BANANA = NamedMenuOption(2, "Banana")


class TestChooseMenu:
    """Test the numbered menu."""

    def test_quit(self):
        """Test that blank input redisplays and 0 quits."""
        out = Transcript()
        assert choose_menu([APPLE], scripted("", "0"), out) is None
        assert out.lines == [
            "1. Apple", "", PROMPT,
            "1. Apple", "", PROMPT,
            QUIT_MESSAGE,
        ]

    def test_invalid_then_first(self):
        """Test that out-of-range numbers are rejected."""
        out = Transcript()
        assert choose_menu([APPLE, BANANA], scripted("", "10", "-3", "1"), out) is APPLE
        assert out.lines.count(PROMPT) == 4
        assert out.lines[-1] == "You chose to study Apple"

    def test_second(self):
        """Test choosing the second option after a bad choice."""
        out = Transcript()
        assert choose_menu([APPLE, BANANA], scripted("3", "2"), out) is BANANA
        assert out.lines == [
            "1. Apple", "2. Banana", "", PROMPT,
            "1. Apple", "2. Banana", "", PROMPT,
            "You chose to study Banana",
        ]

    def test_non_numeric(self):
        """Test that words are not accepted as choices."""
        out = Transcript()
        assert choose_menu([APPLE], scripted("one", " 1 "), out) is APPLE


BANK = QuestionBank(
    name="Capitals",
    questions=(Question("Capital of France?", "Paris"), Question("Capital of Peru?", "Lima")),
)


class TestRenderAndStep:
    """Test single-turn helpers."""

    def test_render_phases(self):
        """Test the displayed text for each phase."""
        engine = QuestionBankEngine.from_bank(BANK)
        assert render(engine) == "Q: Capital of France?"
        assert render(engine.show()) == "A: Paris"
        done = engine.show().next(True).show().next(True)
        assert render(done) == ""

    def test_step_reveals_then_judges(self):
        """Test that any input reveals, then the judge decides."""
        engine = step(QuestionBankEngine.from_bank(BANK), "whatever")
        assert engine.get_state() is Phase.ANSWERING
        engine = step(engine, "nope")
        assert engine.get_text() == "Capital of Peru?"
        assert engine.correct_count == 0


class TestStudyBank:
    """Test the full study loop."""

    def test_all_correct(self):
        """Test a session with no mistakes."""
        out = Transcript()
        result = study_bank(BANK, input_fn=scripted("", "yes", "", "indeed"), output_fn=out)
        assert result == StudyDeckResult(num_questions=2, num_attempts=2)
        assert out.lines == [
            "Q: Capital of France?", REVEAL_PROMPT,
            "A: Paris", JUDGE_PROMPT,
            "Q: Capital of Peru?", REVEAL_PROMPT,
            "A: Lima", JUDGE_PROMPT,
        ]

    def test_missed_question_comes_back(self):
        """Test that a wrong answer is asked again after the others."""
        out = Transcript()
        responses = scripted("", "nope", "", "yerp", "", "aye")
        result = study_bank(BANK, input_fn=responses, output_fn=out)
        assert result == StudyDeckResult(num_questions=2, num_attempts=3)
        questions = [line for line in out.lines if line.startswith("Q: ")]
        assert questions == ["Q: Capital of France?", "Q: Capital of Peru?", "Q: Capital of France?"]

    def test_naive_judge(self):
        """Test that the judge can be swapped for the keystroke convention."""
        single = QuestionBank("One", (Question("Q?", "A"),))
        # "indeed" is positive for the classifier but not for the naive judge
        result = study_bank(
            single,
            judge=naive_classifier,
            input_fn=scripted("", "indeed", "", "n", "", "y"),
            output_fn=Transcript(),
        )
        assert result == StudyDeckResult(num_questions=1, num_attempts=3)
