EXTRACTION_SYSTEM_INSTRUCTIONS = (
    "You are a content extraction specialist. Extract structured information "
    "from articles and return only valid JSON."
)

EXTRACTION_PROMPT_TEMPLATE = """
Extract the following information from this article content and return it as a JSON object:

1. title: The main title/headline
2. summary: A concise 2-3 sentence summary
3. key_points: Array of 3-5 main points or takeaways
4. entities: Array of important people, places, organizations mentioned
5. sentiment: Overall sentiment (positive, negative, neutral)
6. category: Suggested category/topic for the article
7. tags: Array of relevant tags/keywords

Article content:
{content}...

Return only valid JSON without any additional text or formatting.
"""
