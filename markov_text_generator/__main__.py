import sys

from markov_text_generator.cli import main

sys.exit(main())
