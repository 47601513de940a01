# Abstraction Layer for GCS functionality
#   Narrow storage capability set that the transfer functions depend on
#   GcsBackend maps google-cloud-storage onto it and standardises its errors

from abc             import ABC, abstractmethod
from base64          import b64decode
from collections     import namedtuple
from contextlib      import contextmanager
from google.api_core import exceptions as api_exceptions
from google.auth     import exceptions as auth_exceptions
from google.cloud    import storage
import requests

from gcs_tools.errors import BucketNotFound, ObjectNotFound, StorageError

BucketInfo = namedtuple('BucketInfo', 'name location storage_class')
ObjectInfo = namedtuple('ObjectInfo', 'bucket name size crc32c md5_hash generation content_type')

_REMOTE_ERRORS = (api_exceptions.GoogleAPIError,
                  auth_exceptions.GoogleAuthError,
                  requests.exceptions.RequestException)

################################################################
# Storage: capability interface
################################################################

class StorageBackend(ABC):

    @abstractmethod
    def bucket_info(self, bucket, timeout):
        """Return BucketInfo, raise BucketNotFound if the bucket is absent."""

    @abstractmethod
    def object_info(self, bucket, name, timeout):
        """Return ObjectInfo, raise ObjectNotFound if the object is absent."""

    @abstractmethod
    def open_reader(self, bucket, name, timeout):
        """Return a readable binary stream, raise ObjectNotFound if the object is absent."""

    @abstractmethod
    def open_writer(self, bucket, name, content_type, timeout):
        """Return a writable binary stream.

        close() commits the object, terminate() abandons the upload without committing it.
        """

    @abstractmethod
    def delete(self, bucket, name, timeout):
        pass

    @abstractmethod
    def close(self):
        pass

################################################################
# Storage: Google Cloud Storage implementation
################################################################

def connect_gcs(public_request, key_path):

    try:
        if public_request:
            client = storage.Client.create_anonymous_client()
        else:
            client = storage.Client.from_service_account_json(key_path)
    except (OSError, ValueError, KeyError) + _REMOTE_ERRORS as exc:
        raise StorageError(str(exc)) from exc

    return GcsBackend(client)

@contextmanager
def _remote_call(not_found_error, what):

    try:
        yield
    except api_exceptions.NotFound as exc:
        raise not_found_error(what) from exc
    except _REMOTE_ERRORS as exc:
        raise StorageError('{}: {}'.format(what, exc)) from exc

def crc32c_value(encoded):

    if not encoded: return None                       # provider omits the checksum for some composite objects
    return int.from_bytes(b64decode(encoded), 'big')  # base64 big-endian -> unsigned int

def object_info_from_blob(blob):

    return ObjectInfo(blob.bucket.name, blob.name, blob.size, crc32c_value(blob.crc32c),
                      blob.md5_hash, blob.generation, blob.content_type)

class GcsBackend(StorageBackend):

    def __init__(self, client):
        self.client = client

    def bucket_info(self, bucket, timeout):

        with _remote_call(BucketNotFound, 'gs://' + bucket):
            bkt = self.client.get_bucket(bucket, timeout=timeout, retry=None)

        return BucketInfo(bkt.name, bkt.location, bkt.storage_class)

    def _get_blob(self, bucket, name, timeout):

        with _remote_call(ObjectNotFound, 'gs://{}/{}'.format(bucket, name)):
            blob = self.client.bucket(bucket).get_blob(name, timeout=timeout, retry=None)

        if blob is None: raise ObjectNotFound('gs://{}/{}'.format(bucket, name))
        return blob

    def object_info(self, bucket, name, timeout):

        return object_info_from_blob(self._get_blob(bucket, name, timeout))

    def open_reader(self, bucket, name, timeout):

#       BlobReader is lazy, so fetch metadata first to fail here rather than on first read
        blob = self._get_blob(bucket, name, timeout)

        return blob.open('rb', timeout=timeout, retry=None, if_generation_match=blob.generation)

    def open_writer(self, bucket, name, content_type, timeout):

        upload_kwargs = {'timeout': timeout}
        if content_type: upload_kwargs['content_type'] = content_type

        blob = self.client.bucket(bucket).blob(name)

        return blob.open('wb', ignore_flush=True, retry=None, **upload_kwargs)

    def delete(self, bucket, name, timeout):

        with _remote_call(ObjectNotFound, 'gs://{}/{}'.format(bucket, name)):
            self.client.bucket(bucket).delete_blob(name, timeout=timeout, retry=None)

    def close(self):

        self.client.close()
