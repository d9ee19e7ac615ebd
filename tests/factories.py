
from src.models.schemas.roadmap import InterviewQuestion, Phase, Topic


def make_topic(topic_id: str, title: str | None = None, questions: tuple[InterviewQuestion, ...] | None = None) -> Topic:
    return Topic(
        id=topic_id,
        title=title or topic_id.replace("-", " ").title(),
        explanation=f"**{topic_id}** explained with `code`.",
        code_example=f"  console.log('{topic_id}');  ",
        exercise=f"Practice {topic_id}.",
        common_mistakes=(f"Forgetting {topic_id}",),
        interview_questions=questions
        if questions is not None
        else (InterviewQuestion(type="conceptual", q=f"What is {topic_id}?", a=f"It is **{topic_id}**."),),
    )


def make_phase(phase_id: str, topic_ids: list[str], title: str | None = None) -> Phase:
    return Phase(
        id=phase_id,
        title=title or f"{phase_id.title()}: Fundamentals",
        emoji="🟢",
        description=f"Description of {phase_id}",
        topics=tuple(make_topic(topic_id) for topic_id in topic_ids),
    )


