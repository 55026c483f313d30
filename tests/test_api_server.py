from fastapi.testclient import TestClient

from solo_quiz.core.models import TrueFalseQuestion
from solo_quiz.core.question_bank import build_sample_questions
from solo_quiz.core.quiz_manager import QuizManager
from solo_quiz.server.api_server import create_api_app


def make_client(questions=None):
    if questions is None:
        questions = build_sample_questions()
    return TestClient(create_api_app(QuizManager(questions)))


def test_serves_quiz_page():
    client = make_client()
    response = client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'id="choices"' in response.text


def test_start_uses_guest_for_blank_name():
    client = make_client()
    response = client.post("/start", json={"player_name": "  "})
    assert response.status_code == 200
    body = response.json()
    assert body["player_name"] == "Guest"
    assert body["state"] == "awaiting_selection"
    assert body["position"] == 1


def test_submit_without_selection_conflicts():
    client = make_client()
    client.post("/start", json={"player_name": "Ada"})
    response = client.post("/submit")
    assert response.status_code == 409
    assert response.json()["detail"] == "Choose an answer first."


def test_answer_flow_scores_once():
    client = make_client()
    client.post("/start", json={"player_name": "Ada"})

    selected = client.post("/select", json={"value": 0})
    assert selected.status_code == 200
    assert selected.json()["state"] == "awaiting_submission"

    submitted = client.post("/submit")
    assert submitted.status_code == 200
    body = submitted.json()
    assert body["is_correct"] is True
    assert body["score"] == 2
    assert body["correct_option_indexes"] == [0]

    assert client.post("/submit").status_code == 409
    assert client.post("/select", json={"value": 1}).status_code == 409
    assert client.get("/state").json()["score"] == 2


def test_numeric_string_answer_counts():
    client = make_client()
    client.post("/start", json={})
    client.post("/select", json={"value": "0"})
    assert client.post("/submit").json()["is_correct"] is True


def test_full_session_reaches_result():
    client = make_client()
    client.post("/start", json={"player_name": "Ada"})
    for value in [0, 0, False, 0, True]:
        client.post("/select", json={"value": value})
        assert client.post("/submit").status_code == 200
        assert client.post("/next").status_code == 200

    state = client.get("/state").json()
    assert state["state"] == "finished"
    assert state["summary"] == {
        "player_name": "Ada",
        "score": 6,
        "correct": 3,
        "total": 5,
        "max_score": 10,
        "percent": 60,
        "percent_text": "60%",
    }
    assert client.post("/next").status_code == 409

    restarted = client.post("/start", json={"player_name": "Ada"}).json()
    assert restarted["score"] == 0
    assert restarted["position"] == 1


def test_true_false_question_accepts_booleans():
    client = make_client()
    client.post("/start", json={})
    for value in [0, 1]:
        client.post("/select", json={"value": value})
        client.post("/submit")
        client.post("/next")

    state = client.get("/state").json()
    assert [option["value"] for option in state["options"]] == [True, False]
    client.post("/select", json={"value": False})
    body = client.post("/submit").json()
    assert body["is_correct"] is True
    assert body["correct_option_indexes"] == [1]


def test_empty_quiz_is_finished_immediately():
    client = make_client([])
    body = client.post("/start", json={}).json()
    assert body["state"] == "finished"
    assert body["summary"]["percent"] == 0


def test_numeric_string_wrong_answer_keeps_selected_index():
    client = make_client()
    client.post("/start", json={})
    assert client.post("/select", json={"value": "1"}).json()["selected_option_index"] == 1

    body = client.post("/submit").json()
    assert body["is_correct"] is False
    assert body["selected_option_index"] == 1
    assert body["correct_option_indexes"] == [0]


def test_overflowing_numeric_answer_is_judged_not_rejected():
    client = make_client()
    client.post("/start", json={})
    client.post("/select", json={"value": "1e400"})
    response = client.post("/submit")
    assert response.status_code == 200
    assert response.json()["is_correct"] is False


def test_next_after_finish_conflicts_without_changing_state():
    client = make_client([TrueFalseQuestion("Statement", True)])
    client.post("/start", json={})
    client.post("/select", json={"value": True})
    client.post("/submit")
    assert client.post("/next").json()["state"] == "finished"

    revision = client.get("/state").json()["revision"]
    response = client.post("/next")
    assert response.status_code == 409
    assert response.json()["detail"] == "The quiz is already finished."
    assert client.get("/state").json()["revision"] == revision
