def print_histogram(histogram, file=None):
    for bucket in histogram:
        print('\t%s - %s: %s' % (bucket.start, bucket.end, bucket.count), file=file)


def print_report(files, dirs, err_count, file=None):
    print('Done', file=file)
    print('Total Files: %s' % (dirs.count + files.count), file=file)
    print('Files: %s, Dirs: %s' % (files.count, dirs.count), file=file)
    print('Errors: Files: %s, Dirs: %s' % (files.access_errors, dirs.access_errors), file=file)
    if files.out_of_range:
        print('Files with values out of histogram range: %s' % files.out_of_range, file=file)
    print(file=file)

    print('File sizes (min bytes - max bytes: count):', file=file)
    print_histogram(files.size, file)
    print('File block counts (min - max: count):', file=file)
    print_histogram(files.block_count, file)
    print('File block sizes (min - max: count):', file=file)
    print_histogram(files.block_size, file)
    print(file=file)

    print('Entries in dir (min - max: count):', file=file)
    print_histogram(dirs.entries, file)
    print('Dir count in dir (min - max: count):', file=file)
    print_histogram(dirs.dirs, file)
    print('Files in dir (min - max: count):', file=file)
    print_histogram(dirs.files, file)

    if err_count > 0:
        print('%s errors encountered' % err_count, file=file)
