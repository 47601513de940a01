# Command line driver shared by the loader and uploader runners
#   Turns LoaderError into a logged fatal line and exit code 1
#   The session is released before the exit code is returned, on every path

import time

from gcs_tools.config_tools   import PROG, UPLOAD, VERSION, parse_args
from gcs_tools.errors         import LoaderError
from gcs_tools.io_tools       import connect_gcs
from gcs_tools.report_tools   import always, configure_logging, duration_line, get_reporter
from gcs_tools.session_tools  import create_session
from gcs_tools.transfer_tools import download, upload

def execute(config, connect=connect_gcs):

    with create_session(config.timeout, config.public_request, config.key_path, connect) as session:

        if config.action == UPLOAD:
            return upload(session, config.file_path, config.bucket_name, config.object_path,
                          config.content_type, config.extra_checks)

        return download(session, config.file_path, config.bucket_name, config.object_path,
                        config.extra_checks)

def main(argv=None, upload_only=False, connect=connect_gcs):

    start = time.monotonic()
    configure_logging()
    always('HELLO MSG: Welcome to %s v%s!', PROG, VERSION)

    try:
        config = parse_args(argv, upload_only)
        execute(config, connect)
    except LoaderError as exc:
        get_reporter().error('FATAL ERROR: %s', exc.message)
        return 1

    always(duration_line(time.monotonic() - start))
    return 0
