import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


dev = _flag("LEX_DEV", "0")
words_path = os.getenv("LEX_WORDS_PATH", os.path.join("data", "words.txt"))
# Short games on a dev box, unless asked otherwise.
game_len = int(os.getenv("LEX_GAME_LEN", "4" if dev else "10"))
letter_source = os.getenv("LEX_LETTER_SOURCE", "points")
reject_proper_nouns = _flag("LEX_REJECT_PROPER_NOUNS", "1")
log_level = os.getenv("LEX_LOG_LEVEL", "INFO").upper()
cors_origins = [o.strip() for o in os.getenv("LEX_CORS_ORIGINS", "*").split(",") if o.strip()]

if __name__ == "__main__":
    print(dev, words_path, game_len, letter_source, reject_proper_nouns, log_level, cors_origins)
