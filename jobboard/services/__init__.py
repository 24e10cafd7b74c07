"""
Service layer

- filters.py: filter sets and predicate descriptors shared by list and count
- repository.py: store access (jobs, companies, categories, alerts)
- pagination.py: page counts and navigation windows
- markdown.py: job description renderer
- formatting.py: salary/date/metadata display helpers
- pages.py: page payload assembly
"""
