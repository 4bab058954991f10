"""
Phrase Decoder Lambda Function.

Decodes 2-4 FixPhrase words back to a coordinate. Word order and case do not
matter and unknown words are ignored; accuracy depends on how many bands the
words cover.

    GET  /decode?phrase=word1%20word2%20word3%20word4
    POST /decode {"phrase": "word1 word2 word3 word4"}
"""
from typing import Dict, Any

from botocore.exceptions import ClientError

from fixphrase.codec import decode
from fixphrase.errors import InputError, WordlistError
from fixphrase.utils import (
    setup_logger,
    create_response,
    get_http_method,
    get_query_params,
    method_not_allowed,
    parse_json_body,
)
from fixphrase.wordlist import get_dictionary

# Initialize logger
logger = setup_logger(__name__)

USAGE = [
    "GET  /decode?phrase=abacus%20abdomen%20...",
    'POST /decode {"phrase":"abacus abdomen ..."}',
]


def read_phrase(event: Dict[str, Any]) -> str:
    """
    Extract the phrase from a POST body.

    Raises:
        ValueError: If the body is not valid for this endpoint
    """
    body = parse_json_body(event, allowed_fields=('phrase',))
    phrase = body.get('phrase', '')
    if not isinstance(phrase, str):
        raise ValueError("field phrase must be a string")
    return phrase


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda handler for phrase decoding."""
    try:
        logger.info("Phrase decoder Lambda invoked")

        method = get_http_method(event)
        if method == 'GET':
            phrase = get_query_params(event).get('phrase', '')
            if not phrase.strip():
                return create_response(400, {
                    'error': 'missing query param: phrase',
                    'usage': USAGE,
                })

        elif method == 'POST':
            try:
                phrase = read_phrase(event)
            except ValueError as e:
                logger.warning(f"Invalid request body: {e}")
                return create_response(400, {'error': 'invalid json', 'detail': str(e)})

        else:
            return method_not_allowed()

        result = decode(get_dictionary(), phrase)

        logger.info(
            f"Decoded '{result.canonical_phrase}' to lat={result.lat} lon={result.lon} "
            f"(accuracy={result.accuracy_degrees})"
        )
        return create_response(200, {
            'result': result.to_dict(),
            'inputWordsSorted': sorted(result.input_words),
        })

    except InputError as e:
        logger.warning(f"Validation error: {e}")
        return create_response(400, {'error': str(e), 'field': e.field})
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        return create_response(400, {'error': str(e)})
    except (WordlistError, OSError) as e:
        logger.error(f"Wordlist error: {e}")
        return create_response(500, {'error': 'Wordlist unavailable'})
    except ClientError as e:
        logger.error(f"AWS service error: {e}")
        return create_response(500, {'error': 'Failed to load wordlist'})
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return create_response(500, {'error': 'Internal server error'})
