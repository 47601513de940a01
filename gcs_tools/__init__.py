from gcs_tools.cli_tools      import execute, main
from gcs_tools.config_tools   import Config, DOWNLOAD, UPLOAD, parse_args
from gcs_tools.errors         import ConfigError, FileAccessError, LoaderError, StorageConnectionError
from gcs_tools.io_tools       import BucketInfo, GcsBackend, ObjectInfo, StorageBackend, connect_gcs
from gcs_tools.report_tools   import always, configure_logging, duration_line, get_reporter
from gcs_tools.session_tools  import Session, create_session
from gcs_tools.transfer_tools import TransferResult, download, upload
