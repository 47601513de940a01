import io
import logging

from gcs_tools.report_tools import always, configure_logging, duration_line


def streams():
    return io.StringIO(), io.StringIO()


def test_errors_go_to_stderr_only():
    out, err = streams()
    logger = configure_logging('INFO', stdout=out, stderr=err)

    logger.info('fine')
    logger.warning('careful')
    logger.error('broken')

    assert '(GCS-Bucket-Loader) INFO: ' in out.getvalue()
    assert '(GCS-Bucket-Loader) WARNING: ' in out.getvalue()
    assert 'broken' not in out.getvalue()
    assert '(GCS-Bucket-Loader) ERROR: ' in err.getvalue()
    assert 'fine' not in err.getvalue()


def test_always_survives_quiet_level():
    out, err = streams()
    logger = configure_logging('ERROR', stdout=out, stderr=err)

    logger.info('hidden')
    always('HELLO MSG: hi')

    assert 'hidden' not in out.getvalue()
    assert '(GCS-Bucket-Loader) ALWAYS: ' in out.getvalue()
    assert 'test_report_tools.py' in out.getvalue()
    assert err.getvalue() == ''


def test_module_loggers_share_handlers():
    out, err = streams()
    configure_logging('INFO', stdout=out, stderr=err)

    logging.getLogger('gcs_tools.transfer_tools').warning('from a module')

    assert 'from a module' in out.getvalue()


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'warning')
    out, err = streams()

    logger = configure_logging(stdout=out, stderr=err)

    assert logger.level == logging.WARNING


def test_duration_line():
    assert duration_line(1.26) == 'BYE MSG: All done in 1.3s, bye!'
    assert duration_line(0) == 'BYE MSG: All done in 0.0s, bye!'
