# Transfer Engine: single upload or download per run
#   Linear: validate -> optional checks -> transfer -> optional verify -> report
#   Every failure raises and nothing is retried; a failed upload is abandoned, never committed

from collections import namedtuple
import logging
import os

from gcs_tools.errors import (BucketNotFound, ConfigError, FileAccessError, ObjectNotFound,
                              StorageConnectionError, StorageError)

CHUNK_SIZE = 1024 * 1024

TransferResult = namedtuple('TransferResult', 'bytes_written object_info')

logger = logging.getLogger(__name__)

################################################################
# Helpers
################################################################

def describe(info):

    return 'SIZE: {}, CRC32C: {}, GENERATION: {}'.format(info.size, info.crc32c, info.generation)

def copy_stream(source, target, remaining=None, chunk_size=CHUNK_SIZE):
    """Copy source to target in chunks and return the byte count.

    remaining is called before every chunk so a session deadline cuts a long copy short.
    """

    written = 0
    while True:
        if remaining is not None: remaining()
        chunk = source.read(chunk_size)
        if not chunk: break
        target.write(chunk)
        written += len(chunk)

    return written

def discard_stream(stream):

#   only reached on a failed copy, the copy error is the one that propagates
    try:
        if hasattr(stream, 'terminate'):
            stream.terminate()                          # cancel the upload instead of committing a partial object
        else:
            stream.close()
    except Exception as exc:
        logger.warning('Cannot release remote stream after failed copy! (%s)', exc)

def check_bucket(session, bucket_name):

    try:
        session.backend.bucket_info(bucket_name, session.remaining())
    except BucketNotFound:
        raise ConfigError('Bucket does not exist! ({})'.format(bucket_name))
    except StorageError as exc:
        raise StorageConnectionError('Cannot fetch bucket info! ({})'.format(exc)) from exc

def fetch_object_info(session, bucket_name, object_path):
    """Return ObjectInfo, or None when the object does not exist."""

    try:
        return session.backend.object_info(bucket_name, object_path, session.remaining())
    except ObjectNotFound:
        return None
    except StorageError as exc:
        raise StorageConnectionError('Cannot fetch object info! ({})'.format(exc)) from exc

################################################################
# Upload
################################################################

def upload(session, file_path, bucket_name, object_path, content_type='', extra_checks=False):

    try:
        source = open(file_path, 'rb')
    except OSError as exc:
        raise FileAccessError('Cannot open requested file! ({})'.format(exc)) from exc

    with source:

        if extra_checks:
            check_bucket(session, bucket_name)

            existing = fetch_object_info(session, bucket_name, object_path)
            if existing is None:
                logger.warning('Object does not exist, going to create a new one.')
            else:
                logger.warning('Object exists, going to override it! (Existing Object\'s %s)', describe(existing))

        try:
            writer = session.backend.open_writer(bucket_name, object_path, content_type, session.remaining())
        except StorageError as exc:
            raise StorageConnectionError('Cannot create new writer! ({})'.format(exc)) from exc

#       writer is a provider stream, its failures are not normalised to StorageError
        try:
            written = copy_stream(source, writer, session.remaining)
            session.remaining()                         # closing the writer commits the object
        except StorageConnectionError:
            discard_stream(writer)
            raise
        except Exception as exc:
            discard_stream(writer)
            raise FileAccessError('Cannot copy file to bucket! ({})'.format(exc)) from exc

        try:
            writer.close()
        except Exception as exc:
            raise StorageConnectionError('Cannot write file to bucket! ({})'.format(exc)) from exc

    if not extra_checks:
        logger.info('SUCCESS: Object uploaded to GCS Bucket. (Written Bytes: %d)', written)
        return TransferResult(written, None)

    uploaded = fetch_object_info(session, bucket_name, object_path)
    if uploaded is None:
        raise StorageConnectionError('Cannot fetch object info! (uploaded object not found)')

    logger.info('SUCCESS: Object uploaded to GCS Bucket. (Uploaded Object\'s %s)', describe(uploaded))
    return TransferResult(written, uploaded)

################################################################
# Download
################################################################

def download(session, file_path, bucket_name, object_path, extra_checks=False):

    if os.path.lexists(file_path):
        if os.path.isfile(file_path):
            logger.warning('File exists, going to override it! (Existing File\'s SIZE: %d)',
                           os.path.getsize(file_path))
        else:
            logger.warning('Path exists but not a regular file!')

    try:
        target = open(file_path, 'wb')
    except OSError as exc:
        raise FileAccessError('Cannot create requested file! ({})'.format(exc)) from exc

    with target:

        if extra_checks:
            check_bucket(session, bucket_name)

            existing = fetch_object_info(session, bucket_name, object_path)
            if existing is None:
                raise ConfigError('Object does not exist! (gs://{}/{})'.format(bucket_name, object_path))
            logger.warning('Object exists! (Existing Object\'s %s)', describe(existing))

        try:
            reader = session.backend.open_reader(bucket_name, object_path, session.remaining())
        except StorageError as exc:
            raise StorageConnectionError('Cannot create new reader! ({})'.format(exc)) from exc

        try:
            written = copy_stream(reader, target, session.remaining)
        except StorageConnectionError:
            discard_stream(reader)
            raise
        except Exception as exc:
            discard_stream(reader)
            raise FileAccessError('Cannot copy object from bucket! ({})'.format(exc)) from exc

        try:
            reader.close()
        except Exception as exc:
            raise StorageConnectionError('Cannot read object from bucket! ({})'.format(exc)) from exc

    logger.info('SUCCESS: Object downloaded from GCS Bucket. (Written Bytes: %d)', written)
    return TransferResult(written, None)
