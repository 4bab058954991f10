"""
Word-list loading.

The word list is a JSON array of strings, read either from a local file or
from an S3 object. The built Dictionary is cached per process so warm Lambda
invocations reuse it.
"""
import json
from typing import List, Optional, Union

import boto3
from botocore.exceptions import ClientError

from fixphrase.config import Config, load_config
from fixphrase.dictionary import Dictionary
from fixphrase.errors import WordlistFormatError
from fixphrase.utils import setup_logger

logger = setup_logger(__name__)

_dictionary: Optional[Dictionary] = None


def parse_wordlist(raw: Union[str, bytes]) -> List[str]:
    """
    Parse wordlist.json content.

    Args:
        raw: JSON document, text or UTF-8 bytes

    Returns:
        Ordered list of words

    Raises:
        WordlistFormatError: If the document is not a JSON array of strings
    """
    try:
        words = json.loads(raw)
    except ValueError as e:
        raise WordlistFormatError(f"decode wordlist.json: {e}") from e

    if not isinstance(words, list):
        raise WordlistFormatError("decode wordlist.json: expected a JSON array")
    for i, word in enumerate(words):
        if not isinstance(word, str):
            raise WordlistFormatError(
                f"decode wordlist.json: entry {i} is not a string"
            )
    return words


def read_wordlist_file(path: str) -> List[str]:
    """Read the word list from a local file."""
    with open(path, 'rb') as f:
        return parse_wordlist(f.read())


def read_wordlist_s3(bucket: str, key: str, s3_client=None) -> List[str]:
    """
    Read the word list from an S3 object.

    Args:
        bucket: Bucket name
        key: Object key
        s3_client: Optional boto3 S3 client

    Returns:
        Ordered list of words
    """
    if s3_client is None:
        s3_client = boto3.client('s3')

    try:
        response = s3_client.get_object(Bucket=bucket, Key=key)
        raw = response['Body'].read()
    except ClientError as e:
        logger.error(f"Failed to read wordlist from s3://{bucket}/{key}: {e}")
        raise

    return parse_wordlist(raw)


def load_words(config: Config) -> List[str]:
    """Read the word list from S3 if a bucket is configured, else from disk."""
    if config.wordlist_bucket:
        return read_wordlist_s3(config.wordlist_bucket, config.wordlist_key)
    return read_wordlist_file(config.wordlist_path)


def get_dictionary(config: Optional[Config] = None) -> Dictionary:
    """
    Get the process-wide Dictionary, loading it on first use.

    Args:
        config: Optional configuration (read from the environment if omitted)

    Returns:
        Cached Dictionary instance
    """
    global _dictionary
    if _dictionary is not None:
        return _dictionary

    config = config or load_config()
    words = load_words(config)
    dictionary = Dictionary(words)
    logger.info(f"Loaded wordlist: {len(dictionary)} words from {config.wordlist_source}")

    _dictionary = dictionary
    return _dictionary


def clear_dictionary_cache() -> None:
    """Drop the cached Dictionary so the next call reloads it."""
    global _dictionary
    _dictionary = None
