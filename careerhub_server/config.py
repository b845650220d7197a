from dataclasses import dataclass
from pathlib import Path
import logging

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "careerData.json"


@dataclass
class ServerConfig:
	"""Configuration for the web server."""
	host: str = "127.0.0.1"
	port: int = 3000
	debug: bool = False
	data_file: Path = None
	
	def __post_init__(self):
		# Set default data file if not provided
		if self.data_file is None:
			self.data_file = Path.cwd() / DEFAULT_DATA_FILE
		elif isinstance(self.data_file, str):
			self.data_file = Path(self.data_file)
		
		# Ensure it's resolved
		self.data_file = self.data_file.resolve()
		
		# Ensure the containing directory exists
		self.data_file.parent.mkdir(parents=True, exist_ok=True)
	
	@property
	def url(self) -> str:
		return f"http://{self.host}:{self.port}"
