TEXTS = {
    "WELCOME_TEXT": (
        "Welcome to Hadith Portal Bot 🕌\n"
        "\n"
        "This bot provides access to authentic hadith collections from the six major books of hadith.\n"
        "\n"
        "Available Commands:\n"
        "\n"
        "• /start - Start the bot\n"
        "• /collections - Browse hadith collections\n"
        "• /search <keyword> - Search hadiths\n"
        "• /random - Get a random hadith\n"
        "• /hadith <collection> <number> - Open a hadith by number\n"
        "• /help - Get help\n"
        "\n"
        "Use the inline keyboard below to navigate:"
    ),
    "HELP_TEXT": (
        "Hadith Portal Bot - Help ❓\n"
        "\n"
        "Commands:\n"
        "\n"
        "/start - Welcome message and main menu\n"
        "/collections - Browse all hadith collections\n"
        "/search <keyword> - Search for hadiths\n"
        "/random - Get a random hadith\n"
        "/hadith <collection> <number> - Open a hadith by number\n"
        "/help - Show this help message\n"
        "\n"
        "How to Search:\n"
        "Use /search followed by your keyword\n"
        "Example: /search prayer\n"
        "\n"
        "Tips:\n"
        "• Search results are shown a few at a time\n"
        "• Use pagination buttons to see more results\n"
        "• Click on a book to view hadiths\n"
        "• Type the bot's name in any chat followed by random or search <keyword>\n"
        "\n"
        "Collections Available:\n"
        "{collections}"
    ),
    "RATE_LIMIT_TEXT": "Please wait a moment before sending another command.",
    "RATE_LIMIT_ALERT": "Please wait a moment...",
    "SEARCH_PROMPT_TEXT": "Please use /search <keyword> command to search.",
    "SEARCH_USAGE_TEXT": "Please provide a search keyword.\nUsage: /search <keyword>",
    "HADITH_USAGE_TEXT": "Usage: /hadith <collection> <number>\nExample: /hadith bukhari 1",
    "NO_RESULTS_TEXT": "No results found for: ",
    "NO_BOOKS_TEXT": "No books found in this collection.",
    "NO_HADITHS_TEXT": "No hadiths found in this book.",
    "HADITH_NOT_FOUND_TEXT": "Hadith not found.",
    "RANDOM_UNAVAILABLE_TEXT": "Sorry, couldn't fetch a random hadith. Please try again.",
    "STALE_BUTTON_TEXT": "This button has expired. Please start again from the collections list.",
    "COLLECTIONS_TITLE": "📚 Hadith Collections",
    "COLLECTIONS_PROMPT": "Select a collection to browse:",
    "BOOKS_TITLE": "📚 {collection}",
    "BOOKS_PROMPT": "Select a book:",
    "HADITHS_TITLE": "📖 {collection}",
    "HADITHS_BOOK": "📑 {book}",
    "HADITHS_SUMMARY": "Page {page}/{total_pages} - Showing {count} hadiths:",
    "SEARCH_TITLE": "🔍 Search Results for:",
    "SEARCH_SUMMARY": "Page {page}/{total_pages} - Showing {count} of {total} results:",
    "SEARCH_HINT": "Click on a hadith to view full details",
    "PAGE_FOOTER": "Page {current}/{total}",
    "UNKNOWN_BOOK": "Unknown",
    "UNKNOWN_COLLECTION": "Unknown Collection",
    "HADITH_HEADING": "🵿 Hadith",
    "ARABIC_HEADING": "Arabic:",
    "ENGLISH_HEADING": "English:",
    "NARRATOR_LABEL": "Narrator:",
    "REFERENCE_LABEL": "Reference:",
    "GRADE_LABEL": "Grade:",
    "REFERENCE_TEXT": "{collection}, Book {book}, Hadith #{number}",
    "BTN_BROWSE_COLLECTIONS": "📚 Browse Collections",
    "BTN_SEARCH_HADITH": "🔍 Search Hadith",
    "BTN_RANDOM": "🎲 Random Hadith",
    "BTN_ANOTHER_RANDOM": "🎲 Another Random",
    "BTN_HELP": "❓ Help",
    "BTN_SEARCH": "🔍 Search",
    "BTN_BACK": "⬅️ Back",
    "BTN_BACK_COLLECTIONS": "⬅️ Back to Collections",
    "BTN_BACK_BOOKS": "⬅️ Back to Books",
    "BTN_PREV": "⬅️ Prev",
    "BTN_PREVIOUS": "⬅️ Previous",
    "BTN_NEXT": "Next ➡️",
    "BTN_HADITH": "🵿 Hadith #{number} [{grade}]",
    "BTN_BOOK": "📖 {title}",
    "INLINE_RANDOM_TITLE": "🎲 Random Hadith",
    "INLINE_RANDOM_DESCRIPTION": "Hadith #{number} from {collection}",
    "INLINE_NO_RESULTS_TITLE": "🔍 No Results Found",
    "INLINE_NO_RESULTS_TEXT": "No results found for ",
    "INLINE_NO_RESULTS_DESCRIPTION": "No hadiths found for: {query}",
    "INLINE_HELP_TITLE": "🕌 Hadith Portal Bot",
    "INLINE_HELP_TEXT": (
        "🕌 Hadith Portal Bot\n"
        "\n"
        "Use inline mode:\n"
        "\n"
        "• random - Get a random hadith\n"
        "• search <keyword> - Search hadiths\n"
        "\n"
        "Example: search prayer"
    ),
    "INLINE_HELP_DESCRIPTION": "Type random or search <keyword>",
}

# Lines rendered bold when a text is decorated for the active parse mode.
HEADINGS = {
    "WELCOME_TEXT": ("Welcome to Hadith Portal Bot 🕌", "Available Commands:"),
    "HELP_TEXT": (
        "Hadith Portal Bot - Help ❓",
        "Commands:",
        "How to Search:",
        "Tips:",
        "Collections Available:",
    ),
    "INLINE_HELP_TEXT": ("🕌 Hadith Portal Bot",),
}
