#!/usr/bin/python3

import sys

import gcs_tools as gcs

def run(argv=None):

#   upload:   -action=upload -file=local.txt -bucket=your-bucket-name -object=path/remote.txt -key=key.json [-type=text/plain]
#   download: -action=download -file=local.txt -bucket=your-bucket-name -object=path/remote.txt -public
#   -extra checks bucket & object state before (and after an upload), -timeout defaults to 60s

    sys.exit(gcs.main(argv))

if __name__ == '__main__': run()
