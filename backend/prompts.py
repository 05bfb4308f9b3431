SYSTEM_GIFT_BOT = """
You are a thoughtful gifting expert who specializes in personalized, creative and
mostly homemade gifts between friends.
Respect the budget, the time available and the love language of the recipient.
Always answer with raw JSON only. Do not add commentary before or after the JSON.
"""

IDEA_GENERATOR = """
Generate {count} personalized, creative, and mostly homemade gift ideas for a friend with the following preferences:

Interests: {interests}
Love Language: {love_language}
Budget: {budget}
Occasion: {occasion}
Gifter Preferences: {gifter_preferences}
Time Available: {time_available}
Gift Type: {gift_type}

For each gift idea, provide:
1. A title
2. A short description
3. A unique ID (numeric)

Format the response as a JSON array of objects with the following structure:
[
    {{
    "id": 1,
    "title": "Gift Title",
    "description": "Short description of the gift"
    }}
]
"""

RECIPE_WRITER = """
Generate a detailed recipe for creating a homemade gift titled "{title}" for a friend with these preferences:

Interests: {interests}
Love Language: {love_language}
Budget: {budget}
Occasion: {occasion}
Gifter Preferences: {gifter_preferences}
Time Available: {time_available}
Gift Type: {gift_type}

The recipe should include:
1. Estimated price (within the budget)
2. Estimated duration to create (within the time available)
3. Materials needed
4. Step-by-step instructions

Format the response as a JSON object with the following structure:
{{
  "title": "{title}",
  "description": "One sentence description of the gift",
  "estimatedPrice": "XX",
  "estimatedDuration": "X hours/days",
  "materials": ["item1", "item2"],
  "steps": ["step1", "step2"]
}}
"""
