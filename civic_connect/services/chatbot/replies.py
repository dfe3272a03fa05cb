"""
Canned replies and static lookup tables for the civic chat assistant.
"""

from typing import Dict, Tuple


# Page name -> path on the public site. Order is the scan order used when
# pulling a page name out of an utterance.
PAGE_PATHS: Dict[str, str] = {
    "home": "/",
    "about": "/about",
    "report": "/report",
    "issues": "/issues",
    "dashboard": "/dashboard",
    "login": "/login",
    "register": "/register",
    "admin": "/admin",
    "vote": "/issues/vote",
    "ai insights": "/ai-insights",
}

DEFAULT_PAGE = "home"

# Topic keyword -> canned insight. Declaration order is the scan order.
INSIGHT_TOPICS: Dict[str, str] = {
    "water": "Water-related issues have increased by 15% in the last month, primarily in Andheri and Bandra areas.",
    "electricity": "Power outages have decreased by 20% since last quarter. Most reports now come from older neighborhoods.",
    "roads": "Road and pothole complaints peak during monsoon season. Bandra West currently has the highest number of active road issues.",
    "garbage": "Garbage collection issues are most reported on Mondays and Tuesdays, with Kurla having the highest concentration.",
    "drainage": "Drainage problems are predicted to increase by 30% in the coming monsoon season based on historical data.",
}

INSIGHTS_PREFIX = "AI Insights: "

INSIGHTS_TOPIC_PROMPT = (
    "I can provide AI insights on water, electricity, roads, garbage, and drainage issues. "
    "Please specify which area you're interested in."
)

LINK_REPLY = "Here's the link to the {page} page: {url}"

LINK_NOT_FOUND_REPLY = (
    'I couldn\'t find a link for "{page}". '
    "Available pages are: {pages}."
)

RAISE_QUERY_REPLY = (
    "I can help you raise a new query. Please provide the following details:\n\n"
    "1. Issue type (e.g., water, electricity, roads)\n"
    "2. Location\n"
    "3. Brief description of the problem\n\n"
    "Or I can help you fill the report form directly. Would you like to do that?"
)

TRACK_QUERY_REPLY = (
    "To track your existing query, please provide your query ID (e.g., MCC-2023-12345). "
    "If you don't have it, I can help you find it with your registered email address."
)

FILL_REPORT_FORM_REPLY = (
    "I can help you fill the report form. Let's start with the basic information:\n\n"
    "1. What type of issue are you reporting? (e.g., pothole, water supply, electricity)\n"
    "2. Where is this issue located?\n"
    "3. How severe is the issue?\n\n"
    "You can also visit the report page directly: {report_url}"
)

LATEST_ISSUES: Tuple[str, ...] = (
    "Water supply disruption in Dadar West (2 hours ago)",
    "Multiple potholes on Linking Road, Bandra (5 hours ago)",
    "Street light malfunction in Andheri East (yesterday)",
    "Garbage collection missed in Kurla West (yesterday)",
    "Drainage blockage causing waterlogging in Sion (2 days ago)",
)

LATEST_ISSUES_REPLY = "The latest issues reported in Mumbai are:\n\n" + "\n".join(
    f"{rank}. {issue}" for rank, issue in enumerate(LATEST_ISSUES, start=1)
)

GREETING_REPLY = (
    "Hello! I'm your Mumbai Civic Connect assistant. How can I help you today? You can ask me to:\n\n"
    "• Raise a new query\n"
    "• Track an existing query\n"
    "• Fill a report form\n"
    "• Get a link to a specific page\n"
    "• Provide AI insights on civic issues\n"
    "• Show the latest reported issues"
)

HELP_REPLY = (
    "I can help you with the following:\n\n"
    "• Raise a new query about civic issues\n"
    "• Track the status of your existing queries\n"
    "• Fill the report form to submit a new issue\n"
    "• Generate links to specific pages\n"
    "• Provide AI insights on civic issues\n"
    "• Show the latest reported issues\n\n"
    "What would you like to do?"
)

FALLBACK_REPLY = (
    "I'm sorry, I didn't understand that. "
    "Would you like to raise a query, track an existing query, or fill a report form?"
)


def format_page_list(pages) -> str:
    """Render page names as 'a, b, and c'."""
    pages = list(pages)
    if len(pages) <= 1:
        return "".join(pages)
    return ", ".join(pages[:-1]) + ", and " + pages[-1]
