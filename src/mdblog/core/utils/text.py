"""Text helpers: URL slugs and content hashes"""

import hashlib
import re
import unicodedata


def slugify(text: str) -> str:
    """Convert text to a lowercase, ASCII, hyphen-separated slug."""
    text = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    text = re.sub(r'[^\w\s-]', '', text.lower())
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def sha256(content: str) -> str:
    """Return the hex SHA-256 digest of content encoded as UTF-8."""
    return hashlib.sha256(content.encode('utf-8')).hexdigest()
