"""Storage of encoded calendar documents."""

from pathlib import Path

from passcal.exceptions import FileCreateError, FileWriteError
from passcal.utils.logging_utils import LoggerMixin


class FileSink(LoggerMixin):
    """Writes calendar text to a file.
    
    A single write is attempted per call. Nothing is retried and parent
    directories are not created.
    """
    
    def __init__(self, encoding: str = "utf-8") -> None:
        super().__init__()
        self.encoding = encoding
    
    def write(self, path: str | Path, content: str) -> int:
        """Write ``content`` to ``path``, replacing any existing file.
        
        Args:
            path: Destination file
            content: Calendar text
            
        Returns:
            Number of bytes written
            
        Raises:
            FileCreateError: If the destination cannot be opened or created
            FileWriteError: If the destination was opened but writing failed
        """
        file_path = str(path)
        
        try:
            handle = open(file_path, 'wb')
        except OSError as e:
            reason = e.strerror or str(e)
            self.error(f"Could not create file {file_path} ({reason})")
            raise FileCreateError(file_path, reason, content) from e
        
        try:
            with handle:
                count = handle.write(content.encode(self.encoding))
        except (OSError, UnicodeEncodeError) as e:
            reason = getattr(e, 'strerror', None) or str(e)
            self.error(f"An error occurred while saving data to {file_path} ({reason})")
            raise FileWriteError(file_path, reason, content) from e
        
        self.debug(f"Written {count} bytes to {file_path}")
        return count
