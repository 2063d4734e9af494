"""Slack integration module.

Includes:
- bolt_app: Slack Bolt app, listener registration and Socket Mode
- router: Trigger enum and routing table
- commands: Message and slash command handlers (/hello, /covid19)
- blocks: Block Kit builders for country menus and statistics

The Bolt app is used via Flask routes in covidbot/routes/slack_interactivity.py
or over Socket Mode.
"""
