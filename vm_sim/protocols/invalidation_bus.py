class InvalidationBus:
    """
    A simple invalidation bus to notify listeners about page evictions
    """
    def __init__(self):
        self.listeners = []

    def __str__(self):
        print_str = "Invalidation Bus Listeners:\n"
        for listener in self.listeners:
            print_str += f" - {getattr(listener, 'name', type(listener).__name__)}\n"
        return print_str

    def register_listener(self, listener):
        """
        Register a listener to the invalidation bus, listeners are notified in registration order
        :param listener: object with an on_page_evicted method
        :return: None
        """
        self.listeners.append(listener)

    def publish_page_evicted(self, evicted_entry, timestamp):
        """
        Handles each listener's on_page_evicted method if it exists
        :param evicted_entry: EvictedPageTableEntry
        :param timestamp: int, time of the access that caused the eviction
        :return: None
        """
        for listener in self.listeners:
            on_page_evicted = getattr(listener, "on_page_evicted", None)
            if on_page_evicted:
                on_page_evicted(evicted_entry, timestamp)
