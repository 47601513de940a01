# Configuration Resolver
#   Command line flags -> immutable Config record
#   Single dash long flags (-file x, -file=x) as well as the --file form

from argparse    import ArgumentParser, ArgumentTypeError
from collections import namedtuple
import logging

from gcs_tools.errors import ConfigError

PROG = 'GCS-Bucket-Loader'
VERSION = '2.1'

UPLOAD = 'upload'
DOWNLOAD = 'download'

Config = namedtuple('Config', 'action file_path bucket_name object_path key_path content_type '
                              'extra_checks public_request timeout')

logger = logging.getLogger(__name__)

class _Parser(ArgumentParser):

#   raise instead of printing usage and exiting, the runner decides how to terminate
    def error(self, message):
        raise ConfigError('Invalid parameters! ({})'.format(message))

def str_to_bool(value):

    lowered = value.strip().lower()
    if lowered in ('1', 't', 'true', 'y', 'yes', 'on'): return True
    if lowered in ('0', 'f', 'false', 'n', 'no', 'off'): return False
    raise ArgumentTypeError('invalid boolean value: {!r}'.format(value))

def unsigned_int(value):

    try:
        number = int(value)
    except ValueError:
        raise ArgumentTypeError('invalid unsigned integer value: {!r}'.format(value))
    if number < 0:
        raise ArgumentTypeError('invalid unsigned integer value: {!r}'.format(value))
    return number

def build_parser(upload_only=False):

    parser = _Parser(prog=PROG, description='Uploads a local file to, or downloads it from, a GCS bucket.')

    def flag(name, **kwargs): parser.add_argument('-' + name, '--' + name, dest=name, **kwargs)

    if not upload_only:
        flag('action', default='', help="Type of action, which can be either 'upload' or 'download'. (Mandatory)")
    flag('file', default='', help='Path of local file will be uploaded or downloaded. (Mandatory)')
    flag('bucket', default='', help='Name of the bucket will be used on GCS. (Mandatory)')
    flag('object', default='', help='Path of the object will be placed under bucket on GCS. (Mandatory)')
    flag('key', default='',
         help='Path of local json key file will be used to authenticate on GCS. '
              + ('(Mandatory)' if upload_only else '(Mandatory unless public is set)'))
    flag('type', default='', help='Name of IANA Media Type, upload only. (Optional)')
    flag('extra', nargs='?', const=True, default=False, type=str_to_bool,
         help="Can be set as 'true' to perform bucket and object checks on GCS. (Optional)")
    if not upload_only:
        flag('public', nargs='?', const=True, default=False, type=str_to_bool,
             help="Can be set as 'true' to perform unauthenticated connection to GCS. (Optional)")
        flag('timeout', default=0, type=unsigned_int,
             help='Timeout value in seconds (default 60s) for connection to GCS. (Optional)')
    parser.add_argument('-version', '--version', action='version', version='{} v{}'.format(PROG, VERSION))

    return parser

def resolve(args, upload_only=False):

    action = UPLOAD if upload_only else args.action.strip().lower()
    public_request = False if upload_only else args.public
    timeout = 0 if upload_only else args.timeout

    if not action or not args.file or not args.bucket or not args.object:
        raise ConfigError('All mandatory parameters must be filled!')

    key_path = args.key
    if not public_request and not key_path:
        raise ConfigError('Key parameter is mandatory!' if upload_only else 'Key parameter is mandatory when public is not set!')
    if public_request and key_path:
        logger.warning('Key parameter is unnecessary and discarded when public is set!')
        key_path = ''

    if action not in (UPLOAD, DOWNLOAD):
        raise ConfigError('Wrong action parameter specified! ({})'.format(args.action))

    if args.type and action == DOWNLOAD:
        logger.warning('Type parameter only applies to upload and is ignored.')

    return Config(action, args.file, args.bucket, args.object, key_path, args.type,
                  args.extra, public_request, timeout)

def parse_args(argv=None, upload_only=False):

    args = build_parser(upload_only).parse_args(argv)

    return resolve(args, upload_only)
