"""Thread-safe queue, counting semaphore, spinning mutex and throughput demonstrations."""