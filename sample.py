if __name__ == "__main__":
    import blocksortkit.blocksort
    data = [7,1,3,5,2,1,2,54,7,32]
    encoded, index = blocksortkit.blocksort.encode(data)
    decoded = blocksortkit.blocksort.decode(encoded, index)
    print(data)
    print(encoded, index)
    print(decoded)

    text = "Hello World!"
    encoded, index = blocksortkit.blocksort.encode(text, method="doubling")
    print(repr(encoded), index)
    print(blocksortkit.blocksort.decode(encoded, index))

    import blocksortkit.container as container
    binary = bytes(data) * 100
    stream = container.encode_blocks(binary, block_size=256)
    decoded = container.decode_blocks(stream)
    print(len(binary), len(stream), len(decoded))
    print(binary == decoded)

    exit()
