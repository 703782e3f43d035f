import logging

import streamlit as st

from src.application.conversation import AssessmentConversation
from src.domain.catalog import default_question_catalog
from src.domain.models import AnswerType
from src.infrastructure.config import Settings
from src.infrastructure.storage.plan_store import JsonPlanStore


logger = logging.getLogger(__name__)


DISCLAIMER = (
    "🧠 **DISCLAIMER:** This self-assessment is NOT a diagnosis and does not replace a licensed professional. "
    "If you are in crisis or having thoughts of self-harm, contact your local emergency number right away."
)

SEVERITY_ICONS = {"mild": "🟢", "moderate": "🟡", "severe": "🔴"}


@st.cache_resource
def _question_catalog():
    return default_question_catalog()


def _init_session_state():
    if "conversation" not in st.session_state:
        conversation = AssessmentConversation(questions=_question_catalog())
        conversation.greeting(st.session_state.get("user_name"))
        st.session_state.conversation = conversation


def _render_sidebar():
    st.sidebar.title("⚙️ Settings")
    st.session_state["user_name"] = st.sidebar.text_input("Your name", value=st.session_state.get("user_name", ""))

    st.sidebar.markdown("### Choose a topic")
    for topic in _question_catalog().topics():
        if st.sidebar.button(topic.name, help=topic.description, use_container_width=True):
            st.session_state.conversation.start_assessment(topic.id)
            st.rerun()

    st.sidebar.divider()
    if st.sidebar.button("🔄 New Conversation", use_container_width=True):
        st.session_state.conversation.start_new()
        st.session_state.conversation.greeting(st.session_state.get("user_name"))
        st.rerun()


def _render_question_input(conversation: AssessmentConversation):
    session = conversation.session
    question = session.current_question()
    position, total = session.progress()
    previous = session.current_answer()

    st.progress(position / total, text=f"Question {position} of {total} · {question.category or 'question'}")

    key = f"answer-{session.topic_id.value}-{question.id}"
    if question.type is AnswerType.BINARY:
        index = question.options.index(previous) if previous in question.options else 0
        raw = st.radio(question.text, question.options, index=index, key=key)
    elif question.type is AnswerType.RATING:
        value = previous if previous is not None else question.min_value
        raw = str(st.slider(question.text, question.min_value, question.max_value, value=value, key=key))
    else:
        raw = st.text_area(question.text, value=previous or "", key=key)

    back, forward = st.columns(2)
    if back.button("← Previous", disabled=session.cursor == 0, use_container_width=True):
        conversation.go_back()
        st.rerun()
    label = "Finish Assessment" if position == total else "Next Question"
    if forward.button(label, type="primary", use_container_width=True):
        conversation.submit(raw)
        st.rerun()


def _render_plan(conversation: AssessmentConversation, settings: Settings):
    plan = conversation.plan
    st.markdown(f"## Your Personalized {plan.topic_name} Plan")
    st.caption(plan.description)

    days, count, severity = st.columns(3)
    days.metric("Days", plan.plan_days)
    count.metric("Therapies", len(plan.recommendations))
    severity.metric("Severity", f"{SEVERITY_ICONS[plan.severity.value]} {plan.severity.value}")

    for rec in plan.recommendations:
        with st.expander(f"{rec.priority}. {rec.title} · {rec.estimated_duration}"):
            st.write(rec.description)
            for benefit in rec.benefits:
                st.markdown(f"- {benefit}")

    user_id = st.session_state.get("user_name") or "guest"
    if st.button("✅ Accept Plan", type="primary"):
        try:
            JsonPlanStore(settings.plan_store_path).save_plan(user_id, plan)
            st.success("Therapy plan accepted! You can now start your personalized journey.")
        except OSError as e:
            logger.exception("Saving plan failed: %s", e)
            st.error(f"❌ Could not save your plan: {e}")


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level)

    st.set_page_config(
        page_title="Mental Health Assistant",
        page_icon="🧠",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    _init_session_state()
    _render_sidebar()

    st.markdown("# 🧠 Mental Health Assistant")
    st.info(DISCLAIMER)

    conversation = st.session_state.conversation
    for msg in conversation.conversation_history:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])

    if conversation.stage == "assessment":
        _render_question_input(conversation)
    elif conversation.stage == "plan":
        _render_plan(conversation, settings)

    user_input = st.chat_input("Type your message...")
    if user_input:
        conversation.respond(user_input)
        st.rerun()


if __name__ == "__main__":
    main()
