"""
Configuration for the tagging layer
"""
import os
import logging

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# MongoDB configuration
MONGO_URI = os.getenv('MONGO_URI', 'mongodb://localhost:27017/')
MONGO_DB_NAME = os.getenv('MONGO_DB_NAME', 'taggable')

# Field that holds the tag list on the bundled Note model
TAGS_PATH = os.getenv('TAGS_PATH', 'tags')

# Application settings
DEBUG = os.getenv('DEBUG', 'True') == 'True'
