"""FastAPI server that serves the browser version of the quiz."""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from solo_quiz.constants.about import APP_NAME, APP_VERSION
from solo_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from solo_quiz.core.quiz_manager import QuizManager

logger = logging.getLogger(__name__)

_QUIZ_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>SoloQuiz</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #f5f5f5; color: #1e1e1e; }
      body { margin: 0; padding: 1.5rem; display: flex; justify-content: center; }
      .card { background: #fff; border-radius: 0.75rem; padding: 1.5rem; width: min(640px, 100%); box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.12); }
      .hide { display: none; }
      .row { display: flex; justify-content: space-between; color: #666; margin-bottom: 0.75rem; }
      .primary-button { border: none; border-radius: 0.5rem; padding: 0.75rem 1.25rem; font-size: 1rem; background: #0078d4; color: #fff; cursor: pointer; }
      .primary-button:disabled { opacity: 0.5; cursor: not-allowed; }
      #questionText { font-size: 1.15rem; line-height: 1.5; min-height: 3rem; }
      #choices { display: grid; gap: 0.6rem; margin: 1rem 0; }
      .choice { border: 1px solid #d1d1d1; border-radius: 0.5rem; padding: 0.85rem; font-size: 1rem; background: #f5f5f5; text-align: left; cursor: pointer; }
      .choice.selected { border-color: #0078d4; background: #e5f1fb; }
      .choice.correct { border-color: #107c10; background: #dff6dd; }
      .choice.incorrect { border-color: #d13438; background: #fde7e9; }
      .choice:disabled { cursor: default; }
      #explain { min-height: 1.5rem; color: #444; }
      .actions { display: flex; gap: 0.75rem; justify-content: flex-end; }
      input { padding: 0.6rem; font-size: 1rem; border: 1px solid #d1d1d1; border-radius: 0.5rem; margin-right: 0.5rem; }
      #status { color: #d13438; min-height: 1.25rem; }
    </style>
  </head>
  <body>
    <section class=\"card\" id=\"start\">
      <h1>Object-Oriented Programming Quiz</h1>
      <p>Enter your name and press Start. Leave it empty to play as Guest.</p>
      <input id=\"playerName\" placeholder=\"Your name\" />
      <button id=\"startBtn\" class=\"primary-button\">Start</button>
    </section>
    <section class=\"card hide\" id=\"quiz\">
      <div class=\"row\"><span id=\"progress\"></span><span id=\"score\"></span></div>
      <div id=\"questionText\"></div>
      <div id=\"choices\"></div>
      <div id=\"explain\"></div>
      <p id=\"status\"></p>
      <div class=\"actions\">
        <button id=\"submitBtn\" class=\"primary-button\" disabled>Submit Answer</button>
        <button id=\"nextBtn\" class=\"primary-button\" disabled>Next Question</button>
      </div>
    </section>
    <section class=\"card hide\" id=\"result\">
      <h2>Quiz Complete</h2>
      <p id=\"resultName\"></p>
      <p>Score: <strong id=\"finalScore\"></strong></p>
      <p>Correct: <strong id=\"correctCount\"></strong> / <strong id=\"totalCount\"></strong></p>
      <p>Percent: <strong id=\"percent\"></strong></p>
      <button id=\"restartBtn\" class=\"primary-button\">Play Again</button>
    </section>
    <script>
      const el = (id) => document.getElementById(id);
      const screens = { start: el('start'), quiz: el('quiz'), result: el('result') };
      let revision = null;
      let onStartScreen = true;

      function showScreen(name) {
        Object.entries(screens).forEach(([key, section]) => section.classList.toggle('hide', key !== name));
        onStartScreen = name === 'start';
      }

      async function call(method, path, body) {
        const response = await fetch(path, {
          method,
          headers: { 'Content-Type': 'application/json' },
          body: body === undefined ? undefined : JSON.stringify(body)
        });
        const payload = await response.json().catch(() => ({}));
        if (!response.ok) {
          el('status').textContent = payload.detail || 'Request failed.';
          return null;
        }
        el('status').textContent = '';
        return payload;
      }

      function renderChoices(state) {
        const box = el('choices');
        box.innerHTML = '';
        state.options.forEach((option, index) => {
          const btn = document.createElement('button');
          btn.className = 'choice';
          btn.textContent = option.label;
          if (index === state.selected_option_index) btn.classList.add('selected');
          if (state.state === 'answered') {
            btn.disabled = true;
            if (state.correct_option_indexes.includes(index)) {
              btn.classList.add('correct');
            } else if (index === state.selected_option_index) {
              btn.classList.add('incorrect');
            }
          }
          btn.addEventListener('click', () => selectAnswer(option.value));
          box.appendChild(btn);
        });
      }

      function render(state) {
        if (!state) return;
        revision = state.revision;
        if (state.state === 'finished') {
          const summary = state.summary;
          el('resultName').textContent = summary.player_name;
          el('finalScore').textContent = `${summary.score} / ${summary.max_score}`;
          el('correctCount').textContent = summary.correct;
          el('totalCount').textContent = summary.total;
          el('percent').textContent = summary.percent_text;
          showScreen('result');
          return;
        }
        showScreen('quiz');
        el('progress').textContent = `Question ${state.position}/${state.total}`;
        el('score').textContent = `Score: ${state.score}`;
        el('questionText').innerHTML = state.question_html || '';
        el('explain').innerHTML = state.feedback_html || '';
        renderChoices(state);
        el('submitBtn').disabled = state.state !== 'awaiting_submission';
        el('nextBtn').disabled = state.state !== 'answered';
        el('nextBtn').textContent = state.remaining > 0 ? 'Next Question' : 'Show Result';
      }

      async function selectAnswer(value) {
        render(await call('POST', '/select', { value }));
      }

      el('startBtn').addEventListener('click', async () => {
        render(await call('POST', '/start', { player_name: el('playerName').value }));
      });
      el('submitBtn').addEventListener('click', async () => render(await call('POST', '/submit')));
      el('nextBtn').addEventListener('click', async () => render(await call('POST', '/next')));
      el('restartBtn').addEventListener('click', () => showScreen('start'));

      async function poll() {
        if (onStartScreen) return;
        try {
          const response = await fetch('/state');
          const state = await response.json();
          if (state.revision !== revision) render(state);
        } catch (error) {
          el('status').textContent = 'Unable to reach the quiz server.';
        }
      }

      setInterval(poll, 2000);
    </script>
  </body>
</html>
"""


class StartPayload(BaseModel):
    """Payload schema for starting a play-through."""

    player_name: str | None = None


class SelectPayload(BaseModel):
    """Payload schema for choosing an option."""

    value: bool | int | float | str


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_quiz_page() -> str:
        return _QUIZ_PAGE_HTML

    @app.get("/state")
    def get_state(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return manager.get_snapshot().to_dict()

    @app.post("/start")
    def start_quiz(
        payload: StartPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        return manager.start(payload.player_name).to_dict()

    @app.post("/select")
    def select_answer(
        payload: SelectPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        if not manager.select_answer(payload.value):
            raise HTTPException(status_code=409, detail="No question is open for a new answer.")
        return manager.get_snapshot().to_dict()

    @app.post("/submit")
    def submit_answer(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        if manager.submit() is None:
            snapshot = manager.get_snapshot()
            detail = "Choose an answer first."
            if snapshot.answered or snapshot.finished:
                detail = "This question has already been answered."
            raise HTTPException(status_code=409, detail=detail)
        return manager.get_snapshot().to_dict()

    @app.post("/next")
    def next_question(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        if not manager.advance():
            raise HTTPException(status_code=409, detail="The quiz is already finished.")
        return manager.get_snapshot().to_dict()

    return app


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    logger.info("Quiz page served at http://%s:%d/", host, port)
    return thread
