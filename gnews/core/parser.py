"""
Event-driven RSS parsing for gnews.
"""
import logging
import xml.sax
from xml.sax.handler import ContentHandler, feature_external_ges, feature_namespaces
from typing import Dict, List, Optional

from gnews.core.article import Article
from gnews.core.errors import FeedParseError

# Configure logging
logger = logging.getLogger(__name__)

ITEM_ELEMENT = "item"

# RSS element name -> Article attribute
FIELD_ELEMENTS = {
    "title": "title",
    "link": "link",
    "pubDate": "pub_date_str",
    "description": "description",
    "source": "source",
}


class FeedHandler(ContentHandler):
    """
    SAX handler that collects <item> elements into Article records.

    The handler keeps two pieces of state: the list of articles seen so far
    (the last one is the article being filled) and the field cursor naming the
    element whose character data is currently being collected.
    """

    def __init__(self):
        super().__init__()
        self._drafts: List[Dict[str, List[str]]] = []
        self._open_item = False
        self._articles: List[Article] = []
        self._field: Optional[str] = None

    def startDocument(self):
        self._drafts = []
        self._articles = []
        self._open_item = False
        self._field = None

    def startElement(self, name, attrs):
        if name == ITEM_ELEMENT:
            self._freeze_current()
            self._drafts.append({attr: [] for attr in FIELD_ELEMENTS.values()})
            self._open_item = True
            self._field = None
        else:
            self._field = FIELD_ELEMENTS.get(name)

    def characters(self, content):
        if self._field is None or not self._drafts:
            return
        # expat may split the text of one element across several callbacks
        self._drafts[-1][self._field].append(content)

    def endElement(self, name):
        self._field = None
        if name == ITEM_ELEMENT:
            self._freeze_current()

    def endDocument(self):
        self._freeze_current()

    def _freeze_current(self):
        """Turn the open draft into an immutable Article."""
        if not self._open_item:
            return
        draft = self._drafts[-1]
        self._articles.append(Article(**{attr: "".join(parts) for attr, parts in draft.items()}))
        self._open_item = False

    def articles(self) -> List[Article]:
        """Articles collected by the last completed document."""
        return list(self._articles)


class FeedParser:
    """
    Incremental RSS parser.

    Bytes can be fed in arbitrary chunks; the article list only becomes
    available from close() once the whole document parsed cleanly. A parser
    instance handles one document.
    """

    def __init__(self):
        self._handler = FeedHandler()
        self._reader = xml.sax.make_parser()
        self._reader.setFeature(feature_namespaces, False)
        self._reader.setFeature(feature_external_ges, False)
        self._reader.setContentHandler(self._handler)
        self._started = False
        self._closed = False

    def feed(self, data: bytes) -> None:
        """
        Feed a chunk of the document.

        Args:
            data: Raw bytes, any split point is allowed

        Raises:
            FeedParseError: if the document is malformed
        """
        if self._closed:
            raise FeedParseError("Parser already closed")
        if not self._started:
            # Leading whitespace before the prolog is not fed to expat.
            data = data.lstrip()
            if not data:
                return
            self._started = True
        try:
            self._reader.feed(data)
        except xml.sax.SAXParseException as e:
            self._closed = True
            logger.error(f"Error parsing feed: {e}")
            raise FeedParseError(f"Invalid feed XML: {e}") from e

    def close(self) -> List[Article]:
        """
        Finish the document and return the parsed articles.

        Returns:
            List of Article objects in document order (empty for empty input)

        Raises:
            FeedParseError: if the document is malformed or truncated
        """
        if self._closed:
            raise FeedParseError("Parser already closed")
        self._closed = True
        if not self._started:
            return []
        try:
            self._reader.close()
        except xml.sax.SAXParseException as e:
            logger.error(f"Error parsing feed: {e}")
            raise FeedParseError(f"Invalid feed XML: {e}") from e

        articles = self._handler.articles()
        logger.debug(f"Parsed {len(articles)} articles")
        return articles

    def parse(self, data: bytes) -> List[Article]:
        """
        Parse a complete document.

        Args:
            data: The whole response body

        Returns:
            List of Article objects
        """
        self.feed(data)
        return self.close()


def parse_feed(data: bytes) -> List[Article]:
    """
    Parse an RSS document held in memory.

    Args:
        data: Raw XML bytes

    Returns:
        List of Article objects
    """
    return FeedParser().parse(data)
