"""
Health Check Lambda Function.

Reports service and build metadata along with the loaded word-list size.
Loading the word list here also warms the container for the codec Lambdas
sharing it.
"""
from typing import Dict, Any

from botocore.exceptions import ClientError

from fixphrase.config import load_config
from fixphrase.errors import WordlistError
from fixphrase.utils import setup_logger, create_response, get_utc_timestamp
from fixphrase.wordlist import get_dictionary

# Initialize logger
logger = setup_logger(__name__)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda handler for the health check."""
    try:
        config = load_config()
        dictionary = get_dictionary(config)

        return create_response(200, {
            'ok': True,
            'service': config.server_name,
            'repo': config.repo_url,
            'image': config.image,
            'version': config.version,
            'commit': config.commit,
            'buildDate': config.build_date,
            'wordlistLen': len(dictionary),
            'time': get_utc_timestamp(),
        })

    except (WordlistError, OSError) as e:
        logger.error(f"Wordlist error: {e}")
        return create_response(500, {'ok': False, 'error': 'Wordlist unavailable'})
    except ClientError as e:
        logger.error(f"AWS service error: {e}")
        return create_response(500, {'ok': False, 'error': 'Failed to load wordlist'})
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return create_response(500, {'ok': False, 'error': 'Internal server error'})
