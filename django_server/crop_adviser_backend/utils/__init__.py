from .enum_util import ListableEnum
from .check_uuid import is_valid_uuid
from .logging_utils import get_logger
from .token_generator import generate_random_token
