LANGUAGE_NAMES = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "pt": "Portuguese",
    "it": "Italian",
    "ru": "Russian",
    "pl": "Polish",
    "uk": "Ukrainian",
    "hi": "Hindi",
}


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, "English")


SYSTEM_TEMPLATE = (
    "You are an expert writing coach and journaling specialist. Your job is to generate "
    "personalized writing prompts and suggestions for users based on their writing history "
    "and preferences.\n\n"
    "IMPORTANT: Generate the suggestion in {language_name}.\n\n"
    "Generate 1 high-quality writing suggestion that is:\n"
    "1. Personalized to the user's writing style and patterns\n"
    "2. Relevant to the specific topic they're writing about\n"
    "3. Suited to their current writing level and preferences\n"
    "4. Engaging and inspiring\n"
    "5. Specific enough to be actionable\n"
    "6. Different from previous suggestions; be creative and varied\n"
    "7. Written in the specified language ({language})\n\n"
    "The suggestion should include:\n"
    "- A compelling title (in {language})\n"
    "- A description, the main writing instruction for the user (in {language})\n"
    "- Relevant tags\n"
    "- Confidence level (0.1-1.0)\n"
    "- Brief reasoning for why this suggestion fits the user (in {language})\n\n"
    "Format your response as a JSON array with exactly one object with keys "
    "title, description, prompt, tags, confidence, reasoning."
)

HUMAN_TEMPLATE = (
    "User Profile:\n"
    "- Total entries: {total_entries}\n"
    "- Total words written: {total_words}\n"
    "- Average words per entry: {average_words}\n"
    "- Writing style: {writing_style}\n"
    "- Average entry length: {average_length}\n"
    "- Common themes: {themes}\n"
    "- Current streak: {current_streak} days\n"
    "- Longest streak: {longest_streak} days\n\n"
    "Topic: {topic_title}\n"
    "Description: {topic_description}\n"
    "Target Language: {language_name} ({language})\n\n"
    "Recent entries (for context):\n{recent}\n\n"
    "Request timestamp: {timestamp}\n"
    "Random seed: {seed}\n\n"
    "Please generate a UNIQUE personalized writing suggestion for this user and topic "
    "in {language_name}. Return JSON only."
)
