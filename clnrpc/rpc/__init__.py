"""Request parameters and shared types for Core Lightning RPC calls."""