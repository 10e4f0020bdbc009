"""Configuration management."""


class Config:
    """Configuration management."""

    # Storage settings
    DATA_FILENAME = 'records.db'  # Data file filename
    INDEX_FILENAME = 'records.idx'  # Index file filename
    SYNC_WRITES = False  # fsync the data file after every append

    # Encoding settings
    BYTE_ORDER = '='  # struct prefix: native byte order, standard sizes
    STRING_ENCODING = 'utf-8'

    # Logging settings
    LOG_LEVEL = 'WARNING'
    LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
