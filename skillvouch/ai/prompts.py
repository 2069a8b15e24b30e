"""Fixed instructions and prompt templates for the SkillVouch agents."""

CHAT_SYSTEM_PROMPT = "You are a helpful assistant for SkillVouch, a platform where people trade skills."

QUIZ_SYSTEM_PROMPT = (
    "You write multiple-choice quizzes that check whether someone really knows a skill. "
    "Every question has at least two options and exactly one correct option, "
    "identified by its zero-based index."
)

QUIZ_PROMPT = "Write a {difficulty} quiz about {skill} with {num_questions} questions."

ROADMAP_SYSTEM_PROMPT = (
    "You design practical learning roadmaps. Return milestones in the order a learner should tackle them."
)

ROADMAP_PROMPT = "Create a learning roadmap for {skill}."

SUGGEST_SYSTEM_PROMPT = "You recommend skills worth learning next, each with a one-sentence reason."

SUGGEST_PROMPT = "Current skills: {skills}\nCurrent goals: {goals}\nSuggest up to five skills to learn next."
