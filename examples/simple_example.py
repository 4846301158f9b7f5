"""Simple example of using the expectkit testing framework."""

from expectkit import TestCase


# 1. Define the code under test
class Stack:
    def __init__(self):
        self.items = []

    def push(self, item):
        self.items.append(item)

    def pop(self):
        if not self.items:
            raise IndexError("pop from empty stack")
        return self.items.pop()


# 2. Declare tests as test_* methods
class StackTests(TestCase):
    def set_up(self):
        self.stack = Stack()

    def test_push_pop(self):
        self.stack.push(1)
        self.stack.push(2)
        self.expect_equal(self.stack.pop(), 2)
        self.expect_equal(self.stack.pop(), 1)

    def test_pop_empty(self):
        self.expect_throws(IndexError, self.stack.pop)

    def test_size(self):
        self.stack.push("a")
        self.expect_greater_than(len(self.stack.items), 0)

    def test_peek(self):
        # Stack has no peek yet
        with self.expect_failure():
            self.expect(hasattr(self.stack, "peek"), "stack supports peek")


# 3. Run and print results
if __name__ == "__main__":
    StackTests().run_tests(verbose=True)
