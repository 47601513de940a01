#!/usr/bin/python3

import os

import gcs_tools as gcs

def mainline():

#   find and replace: your-bucket-name, ~/key.json

    gcs.configure_logging()

    with gcs.create_session(0, False, os.path.expanduser('~/key.json')) as session:

#       gcs.upload(session, 'local_file', 'bucket', 'object_path', 'content_type', extra_checks)
        gcs.upload(session, 'example.txt', 'your-bucket-name', 'upload/example.txt', 'text/plain', True)

#       gcs.download(session, 'local_file', 'bucket', 'object_path', extra_checks)
        gcs.download(session, 'example.new', 'your-bucket-name', 'upload/example.txt', True)

mainline()
