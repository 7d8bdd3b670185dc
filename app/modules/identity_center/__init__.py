# modules/identity_center/__init__.py
"""IAM Identity Center directory listing module.

Lists groups (with member counts), users and the members of a group from
an AWS Identity Store.

Features:
- Cursor pagination that hides the per-call item cap
- Member counts computed concurrently under a concurrency ceiling
- Group references resolved by id, exact name or partial name
- Interactive group selection (fzf or a numbered prompt)
- text, json and table output
"""
