"""
Unit tests for blocking access to coroutines
"""

import asyncio

import pytest

from contactosms_sdk.http_clients import BlockingProxy, SyncRunner, run_sync


class Greeter:
    greeting = "hello"
    
    async def greet(self, name):
        await asyncio.sleep(0)
        return f"{self.greeting} {name}"
    
    def shout(self, name):
        return name.upper()


async def current_loop():
    return asyncio.get_running_loop()


class TestSyncRunner:
    """Test the private-loop runner"""
    
    def test_run(self):
        runner = SyncRunner()
        try:
            assert runner.run(Greeter().greet("world")) == "hello world"
        finally:
            runner.close()
    
    def test_loop_reused(self):
        """Consecutive calls run on the same loop"""
        runner = SyncRunner()
        try:
            assert runner.run(current_loop()) is runner.run(current_loop())
        finally:
            runner.close()
    
    def test_reopens_after_close(self):
        runner = SyncRunner()
        first = runner.run(current_loop())
        runner.close()
        assert first.is_closed()
        
        second = runner.run(current_loop())
        runner.close()
        assert second is not first
    
    def test_exceptions_propagate(self):
        async def fail():
            raise KeyError("boom")
        
        runner = SyncRunner()
        try:
            with pytest.raises(KeyError):
                runner.run(fail())
        finally:
            runner.close()
    
    @pytest.mark.asyncio
    async def test_refuses_running_loop(self):
        runner = SyncRunner()
        with pytest.raises(RuntimeError, match="running event loop"):
            runner.run(current_loop())


class TestRunSync:
    """Test the one-shot helper"""
    
    def test_without_runner(self):
        assert run_sync(Greeter().greet("there")) == "hello there"
    
    @pytest.mark.asyncio
    async def test_inside_loop(self):
        with pytest.raises(RuntimeError):
            run_sync(current_loop())


class TestBlockingProxy:
    """Test the blocking wrapper"""
    
    def test_coroutine_methods_block(self):
        proxy = BlockingProxy(Greeter())
        assert proxy.greet("bob") == "hello bob"
    
    def test_other_attributes_pass_through(self):
        proxy = BlockingProxy(Greeter())
        assert proxy.shout("bob") == "BOB"
        assert proxy.greeting == "hello"
    
    def test_wrapped_metadata(self):
        assert BlockingProxy(Greeter()).greet.__name__ == "greet"
