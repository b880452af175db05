"""
Package: delivery
Description: Event delivery to configured HTTP targets.

Provides push delivery over httpx and the tenacity retry policy used
for handling transient delivery failures.
"""
