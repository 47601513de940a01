#!/usr/bin/python3

import sys

import gcs_tools as gcs

def run(argv=None):

#   upload only, key always required:
#   -file=local.txt -bucket=your-bucket-name -object=path/remote.txt -key=key.json [-type=text/plain] [-extra]

    sys.exit(gcs.main(argv, upload_only=True))

if __name__ == '__main__': run()
