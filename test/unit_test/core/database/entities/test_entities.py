"""Unit tests for entity defaults, timestamp columns and JSON column accessors."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import DateTime

from skillvouch.core.database import Base, create_sessionmaker
from skillvouch.core.database.base import utc_now
from skillvouch.core.database.entities import (
    ExchangeRequest,
    ExchangeStatus,
    Message,
    Quiz,
    QuizAttempt,
    QuizDifficulty,
    User,
)


class TestUser:
    def test_defaults(self):
        user = User(id="u1", name="Alice", email="alice@example.com")

        assert user.password == ""
        assert user.bio == ""
        assert user.rating == 5.0
        assert user.get_skills_known() == []
        assert user.get_skills_to_learn() == []

    def test_skill_round_trip(self):
        user = User(id="u1", name="Alice", email="alice@example.com")
        user.set_skills_known(["Python", "SQL"])

        assert user.skills_known == '["Python", "SQL"]'
        assert user.get_skills_known() == ["Python", "SQL"]

    def test_corrupt_skills_read_as_empty(self):
        user = User(id="u1", name="Alice", email="a@x", skills_known="{oops", skills_to_learn='{"a": 1}')

        assert user.get_skills_known() == []
        assert user.get_skills_to_learn() == []


class TestMessage:
    def test_server_side_id_and_timestamp(self):
        message = Message(sender_id="a", receiver_id="b", content="hi")

        assert len(message.id) == 36
        assert message.timestamp > 1_600_000_000_000
        assert message.read is False


class TestExchangeRequest:
    def test_default_status_is_pending(self):
        request = ExchangeRequest(requester_id="a", target_id="b", skill_to_teach="Go", skill_to_learn="Rust")

        assert request.status == ExchangeStatus.PENDING.value
        assert request.message == ""

    def test_status_values(self):
        assert {s.value for s in ExchangeStatus} == {"pending", "accepted", "declined", "completed"}


class TestQuiz:
    def test_questions_skip_non_objects(self):
        quiz = Quiz(title="t", skill="Python", questions='[{"question": "q"}, "junk", 3]')

        assert quiz.get_questions() == [{"question": "q"}]
        assert quiz.difficulty == QuizDifficulty.INTERMEDIATE.value

    def test_attempt_answers(self):
        attempt = QuizAttempt(user_id="u", quiz_id="q")
        attempt.set_answers([0, None, 2])

        assert attempt.get_answers() == [0, None, 2]
        assert attempt.completed is False
        assert attempt.score is None


def _as_utc(value: datetime) -> datetime:
    # SQLite hands DATETIME values back without an offset
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class TestTimestampColumns:
    def test_utc_now_is_timezone_aware(self):
        assert utc_now().tzinfo is not None
        assert utc_now().utcoffset() == timedelta(0)

    def test_datetime_columns_declare_timezone(self):
        for table in Base.metadata.sorted_tables:
            for column in table.columns:
                if isinstance(column.type, DateTime):
                    assert column.type.timezone is True, f"{table.name}.{column.name}"

    async def test_default_timestamps_survive_a_round_trip(self, in_memory_engine):
        before = utc_now()
        async with create_sessionmaker(in_memory_engine)() as session:
            session.add(User(id="u1", name="Alice", email="alice@example.com"))
            await session.commit()
            session.add(Quiz(id="q1", title="Basics", skill="Python", created_by="u1"))
            session.add(
                ExchangeRequest(id="r1", requester_id="u1", target_id="u1", skill_to_teach="Go", skill_to_learn="Rust")
            )
            await session.commit()

        async with create_sessionmaker(in_memory_engine)() as session:
            user = await session.get(User, "u1")
            quiz = await session.get(Quiz, "q1")
            request = await session.get(ExchangeRequest, "r1")

        for stamp in (user.created_at, user.updated_at, quiz.created_at, request.updated_at):
            assert abs(_as_utc(stamp) - before) < timedelta(minutes=1)
