"""News Search Streamlit UI.

A search page over NewsAPI.org: search by topic or show top headlines,
rendered as a grid of article cards.
"""

from datetime import datetime
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

from news_search import Article, ConfigurationError, NewsClient, SearchResult, create_client
from news_search.config import get_client_config

# Load .env file from project root
load_dotenv(Path(__file__).parent.parent / ".env")

PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200?text=No+Image"
NO_DESCRIPTION = "No description available"
GRID_COLUMNS = 3


@st.cache_resource
def get_news_client() -> NewsClient:
    """Get the news client for the configured transport (built once)."""
    return create_client(get_client_config())


def format_published_date(published_at: datetime | None) -> str:
    """Format a publication time as e.g. "Jan 5, 2025"."""
    if published_at is None:
        return ""
    return f"{published_at.strftime('%b')} {published_at.day}, {published_at.year}"


def load_client() -> NewsClient | None:
    """Load the news client at startup, reporting configuration errors."""
    try:
        return get_news_client()
    except ConfigurationError as e:
        st.error(f"Configuration error: {e}")
        return None


def run_search(client: NewsClient, topic: str | None = None) -> SearchResult:
    """Run a topic search, or top headlines when no topic is given.

    Args:
        client: News client loaded at startup
        topic: Search topic, None for top headlines

    Returns:
        SearchResult from the news client
    """
    if topic is None:
        return client.fetch_top_headlines()
    return client.fetch_news(topic)


def init_session_state():
    """Initialize session state variables."""
    if "articles" not in st.session_state:
        st.session_state.articles = []
    if "error" not in st.session_state:
        st.session_state.error = None
    if "has_searched" not in st.session_state:
        st.session_state.has_searched = False


def apply_result(result: SearchResult):
    """Store the latest result in session state (last write wins)."""
    st.session_state.has_searched = True
    st.session_state.articles = result.articles
    st.session_state.error = result.error.message if result.error else None


def handle_search(client: NewsClient, topic: str | None = None):
    """Run a search and store its outcome."""
    with st.spinner("Loading news..."):
        result = run_search(client, topic)
    apply_result(result)


def render_article(article: Article):
    """Render a single article card."""
    with st.container(border=True):
        st.image(article.image_url or PLACEHOLDER_IMAGE)
        st.markdown(f"#### [{article.title}]({article.url})")
        st.write(article.description or NO_DESCRIPTION)
        st.caption(
            f"{article.source_name} · {format_published_date(article.published_at)}"
        )


def render_results():
    """Render the results, error or empty state."""
    if st.session_state.error:
        st.error(st.session_state.error)
        return

    articles = st.session_state.articles
    if not articles:
        st.info("No articles found. Try a different topic.")
        return

    columns = st.columns(GRID_COLUMNS)
    for index, article in enumerate(articles):
        with columns[index % GRID_COLUMNS]:
            render_article(article)


def main():
    """Main application entry point."""
    st.set_page_config(page_title="News Search", page_icon="📰", layout="wide")
    init_session_state()

    client = load_client()
    if client is None:
        st.stop()

    st.title("News Search")
    st.caption("Search for the latest news from around the world")

    topic = st.text_input(
        "Enter news topic",
        placeholder="Enter news topic (e.g., technology, sports, politics)",
    )
    has_topic = bool(topic.strip())

    show_col, lucky_col = st.columns([1, 4])
    with show_col:
        if st.button("Show", disabled=not has_topic, type="primary"):
            handle_search(client, topic.strip())
    with lucky_col:
        if st.button("I'm Feeling Lucky", disabled=has_topic):
            handle_search(client)

    st.caption(
        'Search for the latest news on any topic, or click "I\'m Feeling Lucky" '
        "for top headlines"
    )

    if st.session_state.has_searched:
        render_results()
    else:
        st.write("Enter a topic above to start searching for news!")

    st.divider()
    st.markdown("Powered by [NewsAPI.org](https://newsapi.org)")


if __name__ == "__main__":
    main()
