"""
Canonical trigger phrases and keyword vocabularies.

Action values are resubmitted verbatim as the next message, so each phrase
here must keep matching the rule it points at (see tests/test_phrases.py).
"""

from __future__ import annotations

STORE_LOCATOR_URL = "https://www.mcdonalds.com/us/en-us/restaurant-locator.html"
DEALS_URL = "https://www.mcdonalds.com/us/en-us/deals.html"

# Re-entry phrases
POPULAR_PHRASE = "What are popular items?"
BURGERS_PHRASE = "Show me burgers"
NEAREST_STORE_PHRASE = "Find the nearest McDonald's"
DEALS_PHRASE = "What deals are available?"
MENU_PHRASE = "Show me the menu"
BIG_MAC_CALORIES_PHRASE = "How many calories are in a Big Mac?"


def calories_phrase(name: str) -> str:
    return f"How many calories are in {name}?"


def allergens_phrase(name: str) -> str:
    return f"What allergens are in {name}?"


# Opening suggestions shown under the welcome message, as (label, value)
QUICK_ACTIONS = (
    ("Show popular items", POPULAR_PHRASE),
    ("View menu", MENU_PHRASE),
    ("Calories for Big Mac", BIG_MAC_CALORIES_PHRASE),
    ("Find nearest store", NEAREST_STORE_PHRASE),
    ("Any deals now?", DEALS_PHRASE),
)


# Keyword vocabularies, matched as substrings of the normalized message
GREETING_WORDS = ("hi", "hello", "hey")
LOCATION_KEYWORDS = ("nearest", "near me", "location", "store", "restaurant", "open")
DEAL_KEYWORDS = ("deal", "offer", "coupon", "discount")
NUTRITION_KEYWORDS = ("calorie", "nutrition", "allergen", "ingredient")
POPULAR_KEYWORDS = ("popular", "recommend", "best")
MENU_WORD = "menu"

# (category label, keywords), checked in this order; first hit wins
CATEGORY_RULES = (
    ("Burgers", ("burger",)),
    ("Chicken", ("chicken", "nuggets")),
    ("Breakfast", ("breakfast",)),
    ("Desserts", ("dessert", "ice cream", "mcflurry", "pie")),
    ("Drinks", ("drink", "coffee", "latte", "cafe", "iced")),
)
REQUIRED_CATEGORIES = tuple(label for label, _ in CATEGORY_RULES)

POPULAR_TAG = "popular"
POPULAR_FALLBACK_COUNT = 6

# Reply texts
HELP_TEXT = "Ask me about menu items, calories, allergens, deals, or finding a nearby restaurant."
GREETING_TEXT = "Hello! What can I help you find today? Menu, calories, allergens, deals, or locations?"
WELCOME_TEXT = "Hi! I'm your McDonald's helper. Ask me about menu, calories, deals, or finding a nearby restaurant."
FALLBACK_TEXT = (
    "I can help with menu items, calories, allergens, deals, and finding nearby restaurants. "
    "Try asking for 'burgers', 'Big Mac calories', or 'nearest store'."
)
APOLOGY_TEXT = "Sorry, I had trouble responding. Please try again."

# Notices
LOCATOR_NOTICE = "For accurate hours and availability, check the store locator."
DEALS_NOTICE = "Deals vary by location and time."
NUTRITION_NOTICE = "Nutrition and prices can vary by region and serving size."
AVAILABILITY_NOTICE = "Availability varies by location and time of day."
