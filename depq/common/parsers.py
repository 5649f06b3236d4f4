import argparse

profile_parser = argparse.ArgumentParser(
    description='Time MinMaxHeap and PriorityQueue operations against a sorted-list baseline')
profile_parser.add_argument('--sizes', type=int, nargs='+', default=[1000, 10000, 100000],
                            help='Heap sizes to profile')
profile_parser.add_argument('--trials', type=int, default=3,
                            help='Number of repetitions per size')
profile_parser.add_argument('--seed', type=int, default=0,
                            help='Random seed for generating inputs')
profile_parser.add_argument('--maxlen-fraction', type=float, default=0.1,
                            help='Bound for the PriorityQueue bounded_push timing, as a fraction of each size')
profile_parser.add_argument('--results-dir', type=str, default='results',
                            help='Directory in which to save the timing plot')
profile_parser.add_argument('--no-plot', action='store_true',
                            help='Skip saving the timing plot')
profile_parser.add_argument('-v', '--verbose', action='store_true',
                            help='Enable debug logging (PriorityQueue ejections and drops)')
