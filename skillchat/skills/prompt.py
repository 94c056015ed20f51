from skillchat.ai.types import ChatMessage


def build_search_query(role: str, company: str) -> str:
    return f"skills required for {role} at {company}"


def build_skills_messages(
    role: str,
    company: str,
    web_results: str,
    current_skills: list[str],
) -> list[ChatMessage]:
    prompt = (
        f'Analyze the skills required for a "{role}" position at "{company}" '
        "and compare with the user's current skills.\n\n"
        f"Web search results:\n{web_results}\n\n"
        f"User's current skills: {', '.join(current_skills)}\n\n"
        "Respond ONLY with a valid JSON object in this exact format:\n"
        "{\n"
        '  "required_skills": ["skill1", "skill2", "skill3"],\n'
        '  "missing_skills": ["missing_skill1", "missing_skill2"]\n'
        "}\n\n"
        "Focus on technical skills only. Keep skill names concise (1-3 words)."
    )
    return [ChatMessage(role="user", content=prompt)]
