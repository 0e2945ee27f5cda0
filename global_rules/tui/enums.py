from enum import Enum

from global_rules.models import ErrorType


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


ERROR_TYPE_STYLE = {
    ErrorType.CONFIG_PARSING_ERROR: UIStyle.YELLOW.value,
    ErrorType.OPERATION_ERROR: UIStyle.RED.value,
}
