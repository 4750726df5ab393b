from .config import settings
from .sessions import SessionStore
from .vocabulary import WordCatalog

word_catalog = WordCatalog(settings.VOCAB_DIR, min_words=settings.CHOICE_COUNT)
session_store = SessionStore(word_catalog)
