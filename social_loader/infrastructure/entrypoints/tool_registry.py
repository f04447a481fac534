"""
LangChain @tool wrappers, Infrastructure entrypoint / Composition Root.

The @tool decorator is a LangChain infrastructure concern and must NOT appear
in the application or domain layers. This module binds a SupadataLoader to a
tool callable that an agent can invoke.
"""

from typing import Optional

from langchain_core.tools import tool

from social_loader.infrastructure.langchain.supadata_loader import SupadataLoader


def create_tools(loader: SupadataLoader) -> list:
    """Build and return the LangChain tools with the injected loader.

    Args:
        loader: A configured SupadataLoader.

    Returns:
        List with the load_social_media @tool callable.
    """

    @tool
    def load_social_media(
        url: str,
        operation: str = "transcript",
        lang: Optional[str] = None,
    ) -> dict:
        """Fetch the transcript or metadata of a social media video or post.

        Works for YouTube, TikTok, Instagram, Facebook and Twitter/X URLs.

        Args:
            url:       Video or post URL.
            operation: "transcript" (default) or "metadata".
            lang:      Preferred transcript language code, e.g. 'en'.

        Returns:
            Dictionary with keys: page_content, metadata.
            Returns {'error': '<message>'} if the URL is unsupported or the
            extraction service fails.
        """
        try:
            doc = loader.load(url, operation=operation, lang=lang)[0]
            return {"page_content": doc.page_content, "metadata": doc.metadata}
        except Exception as exc:
            return {"error": str(exc)}

    return [load_social_media]
