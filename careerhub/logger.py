import logging, sys

def setup_logging(level = logging.INFO):
	root_logger = logging.getLogger()
	root_logger.setLevel(level)

	# Repeated calls (tests, re-entry from the CLI) must not stack handlers
	for existing in list(root_logger.handlers):
		if getattr(existing, "_careerhub", False):
			root_logger.removeHandler(existing)

	handler = logging.StreamHandler(sys.stdout)
	handler._careerhub = True
	
	formatter = logging.Formatter(
		"[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
		datefmt="%H:%M:%S"
	)
	handler.setFormatter(formatter)
	root_logger.addHandler(handler)
