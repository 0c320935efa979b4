#!/usr/bin/env python
"""Run the Jira AI assistant API server."""

from jira_ai_assistant.__main__ import main


if __name__ == "__main__":
    main()
