"""Reading the text to analyze."""

from typing import IO, Union

class InputReadError(Exception):
    """Exception raised when the input stream cannot be read as text."""
    pass

def read_input(stream: IO[Union[str, bytes]]) -> str:
    """
    Read a stream to the end.
    
    Binary streams are decoded as strict UTF-8, so invalid bytes are rejected
    whatever error handler the interpreter chose for sys.stdin.
    
    Args:
        stream: Open text or binary stream, usually sys.stdin.buffer
        
    Returns:
        str: Entire stream contents
        
    Raises:
        InputReadError: If the stream fails or holds undecodable bytes
    """
    try:
        data = stream.read()
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return data
    except UnicodeDecodeError as e:
        raise InputReadError(f"Input is not valid text: {e}")
    except OSError as e:
        raise InputReadError(f"Cannot read input: {e}")
