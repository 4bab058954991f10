"""
Configuration loader for FixPhrase.

Reads environment variables, with a local .env file applied first when
present. Real environment variables win over .env entries.
"""
from dataclasses import dataclass

from dotenv import load_dotenv

from fixphrase import __version__
from fixphrase.utils import get_env_var

load_dotenv()

DEFAULT_WORDLIST_KEY = 'wordlist/wordlist.json'


@dataclass(frozen=True)
class Config:
    server_name: str = 'fixphrase'
    repo_url: str = ''
    image: str = ''
    version: str = __version__
    commit: str = 'none'
    build_date: str = 'unknown'
    wordlist_path: str = DEFAULT_WORDLIST_KEY
    wordlist_bucket: str = ''
    wordlist_key: str = DEFAULT_WORDLIST_KEY

    @property
    def wordlist_source(self) -> str:
        """Human-readable location of the word list."""
        if self.wordlist_bucket:
            return f"s3://{self.wordlist_bucket}/{self.wordlist_key}"
        return self.wordlist_path


def load_config() -> Config:
    """Load configuration from the environment."""
    return Config(
        server_name=get_env_var('SERVER_NAME', Config.server_name),
        repo_url=get_env_var('REPO_URL', ''),
        image=get_env_var('GHCR_IMAGE', ''),
        version=get_env_var('VERSION', __version__),
        commit=get_env_var('COMMIT', Config.commit),
        build_date=get_env_var('BUILD_DATE', Config.build_date),
        wordlist_path=get_env_var('WORDLIST_PATH', DEFAULT_WORDLIST_KEY),
        wordlist_bucket=get_env_var('WORDLIST_S3_BUCKET', ''),
        wordlist_key=get_env_var('WORDLIST_S3_KEY', DEFAULT_WORDLIST_KEY),
    )
