#!/usr/bin/env python3

import coloredlogs
import logging
import os
import sys
import config
from progress import make_progress
from report import print_report
from stats import DirStats, FileStats, StatsCollector
from walker import walk, WalkError


def scan(root, progress):
    files = FileStats()
    dirs = DirStats()
    collector = StatsCollector(files, dirs, progress)
    with progress:
        err_count = walk(root, collector.visit_file, collector.visit_dir)
    collector.record_children(root)
    return files, dirs, err_count


def main():
    coloredlogs.install(level=config.log_level, fmt=config.log_format)
    root = os.getcwd()
    logging.info('Scanning %s', root)
    try:
        files, dirs, err_count = scan(root, make_progress())
    except WalkError as e:
        logging.critical('Scan failed: %s', e)
        sys.exit(1)
    print_report(files, dirs, err_count)


if __name__ == '__main__':
    main()
