import sys

from obsidian_hugo.cli import main

sys.exit(main())
