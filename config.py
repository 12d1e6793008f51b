import logging

# (grouping_power, max_value_power) for each histogram
dir_histogram_shape = (4, 32)
file_size_shape = (4, 44)
file_block_count_shape = (4, 44)
file_block_size_shape = (4, 32)

progress_refresh_per_second = 10

log_level = logging.INFO
log_format = '%(asctime)s.%(msecs)03d %(levelname)s %(message)s'
