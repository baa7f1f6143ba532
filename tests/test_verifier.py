import pytest
from git_commit_guide.config import Policy
from git_commit_guide.verifier import CommitMessageVerifier, VerificationResult

VERB_VIOLATION = "Subject must start with standard verb"


@pytest.fixture
def verifier():
    return CommitMessageVerifier()


def test_valid_message(verifier):
    result = verifier.verify_message("Add login form\n\nIt validates input on submit.")
    assert not result.has_errors
    assert result.is_valid
    assert result.violations == []


def test_empty_message(verifier):
    result = verifier.verify_message("")
    assert result == VerificationResult(True, ["Empty commit message"])


def test_subject_length_boundary(verifier):
    subject_50 = "Add " + "x" * 46
    subject_51 = "Add " + "x" * 47
    assert len(subject_50) == 50

    assert verifier.verify_message(subject_50).is_valid
    result = verifier.verify_message(subject_51)
    assert result.violations == ["Subject line exceeds 50 characters"]


def test_lowercase_unknown_verb_with_full_stop(verifier):
    result = verifier.verify_message("fix bug.")
    assert result.has_errors
    assert len(result.violations) == 3
    assert result.violations[0].startswith(VERB_VIOLATION)
    assert result.violations[1] == "Subject line ends with a full stop"
    assert result.violations[2] == "Subject line not capitalised"


def test_verb_violation_lists_verbs_in_policy_order(verifier):
    result = verifier.verify_message("Added things")
    assert result.violations == [
        "Subject must start with standard verb: Add, Cut, Fix, Bump, Make, Start, "
        "Stop, Refactor, Reformat, Optimize, Document, Merge"
    ]


@pytest.mark.parametrize("word", ["Update", "Implement", "Changed", "add", "WIP"])
def test_unknown_first_word_is_flagged(verifier, word):
    result = verifier.verify_message(f"{word} the parser")
    assert any(v.startswith(VERB_VIOLATION) for v in result.violations)


@pytest.mark.parametrize(
    "message",
    [
        "Add parser\nbody without gap",
        "fix bug.\nstill no gap",
        "Fix crash\n \n",
    ],
)
def test_missing_blank_line(verifier, message):
    result = verifier.verify_message(message)
    assert "No blank line between subject and body" in result.violations


def test_long_body_lines_report_line_numbers(verifier):
    message = "\n".join(["Fix crash", "", "short", "y" * 73, "", "z" * 72, "w" * 80])
    result = verifier.verify_message(message)
    assert result.violations == [
        "Line 4 exceeds 72 characters",
        "Line 7 exceeds 72 characters",
    ]


def test_whitespace_subject(verifier):
    result = verifier.verify_message("   \n")
    assert result.violations[0].startswith(VERB_VIOLATION)
    assert "Subject line not capitalised" in result.violations


def test_custom_policy_verbs():
    verifier = CommitMessageVerifier(Policy(standard_verbs={"Ship": "Release something"}))
    assert verifier.verify_message("Ship version two").is_valid
    assert verifier.verify_message("Add version two").violations == [
        "Subject must start with standard verb: Ship"
    ]


def test_verify_file(verifier, tmp_path):
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_text("Fix race in watcher\n\nDetails here.\n", encoding="utf-8")
    assert verifier.verify_file(path).is_valid


def test_verify_missing_file(verifier, tmp_path):
    result = verifier.verify_file(tmp_path / "missing.txt")
    assert result.has_errors
    assert len(result.violations) == 1
    assert result.violations[0].startswith("Failed to read file:")


def test_verify_non_utf8_file(verifier, tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"Fix caf\xe9 menu\n")
    result = verifier.verify_file(path)
    assert result.has_errors
    assert result.violations[0].startswith("Failed to read file:")


def test_form_feed_in_subject_is_not_a_line_break(verifier):
    assert verifier.verify_message("Fix crash\x0cin parser").is_valid


def test_crlf_message(verifier):
    assert verifier.verify_message("Fix crash\r\n\r\nBody text.\r\n").is_valid
    result = verifier.verify_message("Fix crash\r\nbody\r\n")
    assert result.violations == ["No blank line between subject and body"]
