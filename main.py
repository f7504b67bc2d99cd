import argparse
import os

from qoidec import convert_directory, parse_header, qoi_to_png

INPUT_IMAGE = "fruits.qoi"


def main():
    parser = argparse.ArgumentParser(description="Decode QOI images to PNG")
    parser.add_argument(
        "input", nargs="?", default=INPUT_IMAGE, help=".qoi file or directory"
    )
    parser.add_argument(
        "--output", "-o", default=None, help="output .png file or directory"
    )
    args = parser.parse_args()

    if os.path.isdir(args.input):
        output_dir = args.output or args.input
        written = convert_directory(args.input, output_dir)
        print(f"Converted {len(written)} images from {args.input} to {output_dir}")
        return

    output = args.output or os.path.splitext(args.input)[0] + ".png"

    with open(args.input, "rb") as f:
        header = parse_header(f)
    print(
        f"Loaded image {args.input}: {header.width}x{header.height} Channels: {int(header.channels)}"
    )

    qoi_to_png(args.input, output)
    print(f"Converted {args.input} to {output}")


if __name__ == "__main__":
    main()
