import sys

from llm_tool_caller.cli import main

sys.exit(main())
