# Project: Choose Our Future — footprint quiz kiosk (Streamlit App)

# app.py
from __future__ import annotations

import logging

import streamlit as st

from emission_catalog import get_catalog
from footprint import catalog_inconsistencies
from models import STEP_ORDER, Category, Step
from results_view import page_results
from settings import QuizSettings, load_settings
from step_content import OPTION_CONTENT, STEP_CONTENT, option_label
from ui_components import interstitial, option_grid, resolve_icon, step_chips
from wizard import QuizSession

log = logging.getLogger(__name__)


# ---------------------------------
# App State
# ---------------------------------

def _init_state(settings: QuizSettings):
    if "quiz" not in st.session_state:
        catalog = get_catalog(settings.catalog_name)
        for row in catalog_inconsistencies(catalog):
            log.warning("Catalog %s: %s/%s horizon figure %s != annual x horizon %s",
                        catalog.name, row[0], row[1], row[3], row[2])
        st.session_state.quiz = QuizSession(catalog)
        log.info("New quiz session with the %s catalog", catalog.name)


def _session() -> QuizSession:
    return st.session_state.quiz


# ---------------------------------
# Callbacks (run before the rerun)
# ---------------------------------

def _on_pick(category: Category, question: str, option_id: str):
    _session().select(category, option_id, question)


def _on_next():
    _session().next()


def _on_back():
    _session().back()


def _on_chip(index: int):
    _session().jump_to(index)


def _on_dismiss():
    _session().dismiss_interstitial()


def _on_reset():
    _session().reset()


# ---------------------------------
# Header / chips
# ---------------------------------

def header(settings: QuizSettings):
    col_title, col_btn = st.columns([5, 1])
    with col_title:
        st.title(settings.kiosk_title)
    with col_btn:
        st.button("Restart", key="btn_restart", on_click=_on_reset, width="stretch")

    quiz = _session()
    done = [STEP_ORDER.index(s) for s in quiz.completed_steps()]
    step_chips([STEP_CONTENT[s].chip_label for s in STEP_ORDER], quiz.active_step_index, done, _on_chip)


# ---------------------------------
# Question page
# ---------------------------------

def page_question(step: Step, settings: QuizSettings):
    quiz = _session()
    content = STEP_CONTENT[step]
    category = step.category

    if quiz.interstitial_open:
        interstitial(content.title, content.explainer, _on_dismiss)
        return

    with st.container(border=True):
        st.subheader(content.title)
        questions = quiz.catalog.applicable_questions(category, quiz.selections)
        for q in questions:
            if len(quiz.catalog.questions_for(category)) > 1:
                st.markdown(f"**{content.question_prompts.get(q.key, q.key)}**")
            opts = [
                (
                    o.option_id,
                    option_label(o.option_id),
                    resolve_icon(getattr(OPTION_CONTENT.get(o.option_id), "icon", None), settings.icon_dir),
                )
                for o in q.options
            ]
            option_grid(
                opts,
                quiz.selections.get(q.key),
                lambda oid, _q=q.key: _on_pick(category, _q, oid),
                key_prefix=f"opt_{q.key}",
            )

        col_back, col_hint, col_next = st.columns([1, 3, 1])
        with col_back:
            if quiz.active_step_index > 0:
                st.button("Back", key="btn_back", on_click=_on_back, width="stretch")
        has_choice = quiz.has_selection()
        with col_hint:
            if not has_choice:
                st.caption("Pick an option to continue")
        with col_next:
            st.button(
                "Next",
                key="btn_next",
                type="primary",
                on_click=_on_next,
                disabled=not has_choice,
                width="stretch",
            )


# ---------------------------------
# Routing
# ---------------------------------

def _route(settings: QuizSettings):
    step = _session().active_step
    if step.is_terminal:
        page_results(_session(), settings)
        st.button("Back", key="btn_back_results", on_click=_on_back)
    else:
        page_question(step, settings)


def footer():
    st.markdown("---")
    st.caption("Developed for museum and classroom use. Figures are illustrative.")


# ---------------------------------
# Entry
# ---------------------------------

def main():
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(page_title=settings.kiosk_title, layout="wide")
    _init_state(settings)
    header(settings)
    _route(settings)
    footer()


if __name__ == "__main__":
    main()
